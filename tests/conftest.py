"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os
from collections import deque

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


def run_bfs(root):
    """
    按遍历节点接口执行一次广度优先搜索

    包内不提供遍历算法，这里模拟外部调用方的用法。
    """
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


@pytest.fixture
def bfs():
    return run_bfs


@pytest.fixture
def chain():
    """A -> B -> C -> D 单向链"""
    from route_graph.core.address import AddressNode

    nodes = [AddressNode(text) for text in ("10.0.0.1", "10.0.0.2", "10.0.0.3", "10.0.0.4")]
    for current, following in zip(nodes, nodes[1:]):
        current.add_neighbor(following)
    return nodes
