"""
网络拓扑地址图基本使用示例
"""
import sys
import os
import tempfile
from collections import deque

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from route_graph import TopologySystem, ParseError


def bfs(root):
    """调用方自己的广度优先搜索"""
    root.visited = True
    root.depth = 0
    root.parent = None
    queue = deque([root])

    while queue:
        current = queue.popleft()
        for neighbor in current.neighbors:
            if not neighbor.visited:
                neighbor.parent = current
                neighbor.depth = current.depth + 1
                neighbor.visited = True
                queue.append(neighbor)


def main():
    """主函数"""
    print("=" * 60)
    print("网络拓扑地址图 - 基本使用示例")
    print("=" * 60)

    # 1. 创建系统实例
    print("\n1. 初始化系统...")
    system = TopologySystem({
        "system_name": "实验室路由拓扑",
        "log_level": "INFO",
    })

    # 2. 从traceroute相邻跳文件导入
    print("\n2. 导入邻接表...")
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = os.path.join(tmp_dir, "hops.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("source,target\n")
            f.write("10.0.0.1,10.0.1.1\n")
            f.write("10.0.1.1,172.16.0.1\n")
            f.write("172.16.0.1,192.168.3.7\n")
            f.write("10.0.1.1,10.0.2.300\n")
            f.write("10.0.0.1,10.0.9.1\n")

        stats = system.load(path)

    print(f"   新增连线: {stats['edges_added']}")
    for rejected in stats['rejected_rows']:
        print(f"   跳过第{rejected['row']}行: {rejected['address']} ({rejected['reason']})")

    # 3. 手动添加连线
    print("\n3. 手动添加连线...")
    system.add_link("10.0.9.1", "192.168.3.7")

    # 4. 遍历并还原路径
    print("\n4. 从 10.0.0.1 遍历...")
    bfs(system.node("10.0.0.1"))
    for node in system.topology:
        path = " -> ".join(n.text for n in node.path_from_root())
        print(f"   {node.text:<15} 跳数={node.depth}  路径: {path}")

    # 5. 重置后换一个根
    print("\n5. 重置后从 192.168.3.7 遍历...")
    system.reset_traversal()
    bfs(system.node("192.168.3.7"))
    for node in system.topology:
        print(f"   {node.text:<15} 跳数={node.depth}")

    # 6. 无效地址
    print("\n6. 无效地址...")
    try:
        system.add_link("10.0.0.1", "10.0.0.256")
    except ParseError as e:
        print(f"   {e}")

    info = system.get_system_info()
    print(f"\n节点数: {info['node_count']}, 有向连线数: {info['edge_count']}")


if __name__ == "__main__":
    main()
