"""
拓扑图模块
统一持有全部地址节点，按编码值索引，负责连线和遍历状态的重置
"""
import logging
from typing import Any, Dict, Iterator, List, Optional, Union

from ..address.node import AddressNode
from ..address.parser import is_valid_address
from ...exceptions import NodeNotFoundError

logger = logging.getLogger(__name__)

AddressLike = Union[str, AddressNode]


class Topology:
    """
    拓扑图，节点的唯一持有者

    同一地址只会对应一个节点对象；节点之间的 parent / neighbors
    都指向本集合中的对象。非线程安全。
    """

    def __init__(self, nodes: Optional[List[AddressNode]] = None):
        """
        初始化拓扑图

        Args:
            nodes: 初始节点列表，编码值重复时保留先出现的节点
        """
        self._nodes: Dict[int, AddressNode] = {}

        for node in nodes or []:
            self.add(node)

    def _key(self, address: AddressLike) -> int:
        if isinstance(address, AddressNode):
            return address.value
        return AddressNode(address).value

    def add(self, address: AddressLike) -> AddressNode:
        """
        添加节点，已存在时返回已有节点

        Args:
            address: 地址文本或地址节点

        Returns:
            集合中对应该地址的节点

        Raises:
            InvalidAddressSyntaxError: 地址文本无效
        """
        node = address if isinstance(address, AddressNode) else AddressNode(address)

        existing = self._nodes.get(node.value)
        if existing is not None:
            return existing

        self._nodes[node.value] = node
        logger.debug(f"添加节点: {node.text}")
        return node

    def get(self, address: AddressLike) -> Optional[AddressNode]:
        """根据地址获取节点，不存在时返回None"""
        return self._nodes.get(self._key(address))

    def require(self, address: AddressLike) -> AddressNode:
        """根据地址获取节点，不存在时抛出NodeNotFoundError"""
        node = self.get(address)
        if node is None:
            raise NodeNotFoundError(address=str(address))
        return node

    def connect(self, source: AddressLike, target: AddressLike, bidirectional: bool = True) -> None:
        """
        连接两个节点，节点不存在时自动添加

        Args:
            source: 起点地址
            target: 终点地址
            bidirectional: 是否双向连接
        """
        src = self.add(source)
        dst = self.add(target)

        src.add_neighbor(dst)
        if bidirectional:
            dst.add_neighbor(src)

        logger.debug(f"连接: {src.text} {'<->' if bidirectional else '->'} {dst.text}")

    def remove(self, address: AddressLike) -> bool:
        """
        移除节点，并从其他节点的相邻集合中删除

        Returns:
            是否成功移除
        """
        key = self._key(address)
        node = self._nodes.pop(key, None)
        if node is None:
            return False

        for other in self._nodes.values():
            other.neighbors.discard(node)
            if other.parent is node:
                other.parent = None

        logger.debug(f"移除节点: {node.text}")
        return True

    def reset_traversal(self) -> None:
        """重置全部节点的遍历状态（visited=False, depth=0, parent=None）"""
        for node in self._nodes.values():
            node.reset_traversal()
        logger.debug(f"已重置 {len(self._nodes)} 个节点的遍历状态")

    def nodes(self) -> List[AddressNode]:
        """获取全部节点，按编码值升序"""
        return [self._nodes[key] for key in sorted(self._nodes)]

    def edge_count(self) -> int:
        """有向邻接关系总数"""
        return sum(len(node.neighbors) for node in self._nodes.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'node_count': len(self._nodes),
            'edge_count': self.edge_count(),
            'nodes': [node.to_dict() for node in self.nodes()],
        }

    def __contains__(self, address: object) -> bool:
        if isinstance(address, AddressNode):
            return address.value in self._nodes
        if is_valid_address(address):
            return self._key(address) in self._nodes
        return False

    def __iter__(self) -> Iterator[AddressNode]:
        return iter(self.nodes())

    def __len__(self) -> int:
        return len(self._nodes)
