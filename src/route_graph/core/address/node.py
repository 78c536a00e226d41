"""
地址节点 - 点分十进制地址值对象，同时充当拓扑图中的遍历节点
"""
import weakref
from functools import total_ordering
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from ...interfaces import ITraversalNode
from ...exceptions import ValidationError
from .parser import parse_octets, encode_octets, compare_values


@total_ordering
class AddressNode(ITraversalNode):
    """
    地址节点

    节点由两部分组成：
    1. 身份信息：text（原始文本）、value（32位编码值），构造后不可变，
       相等、排序与哈希只读取 value
    2. 遍历状态：parent、visited、depth 以及相邻节点集合，
       由外部遍历逻辑在每次搜索中反复改写

    非线程安全：同一组节点同一时刻只应由一个遍历过程持有。
    """

    def __init__(self, text: str):
        """
        初始化地址节点

        Args:
            text: 点分十进制地址，如 "10.0.0.1"

        Raises:
            InvalidAddressSyntaxError: 地址语法无效
        """
        # ========== 身份信息 ==========
        self._octets = parse_octets(text)
        self._text = text
        self._value = encode_octets(self._octets)

        # ========== 遍历状态 ==========
        self._parent_ref: Optional['weakref.ReferenceType[AddressNode]'] = None
        self._visited = False
        self._depth = 0

        # ========== 邻接关系 ==========
        self._neighbors: Set['AddressNode'] = set()

    # ========== 身份信息 ==========

    @property
    def value(self) -> int:
        """获取32位编码值"""
        return self._value

    @property
    def text(self) -> str:
        """获取原始地址文本"""
        return self._text

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        """获取四个段值"""
        return self._octets

    # ========== 遍历状态 ==========

    @property
    def parent(self) -> Optional['AddressNode']:
        """获取前驱节点，前驱已被回收时返回None"""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['AddressNode']) -> None:
        # 不校验可达性，由调用方负责
        self._parent_ref = weakref.ref(node) if node is not None else None

    def get_parent(self) -> Optional['AddressNode']:
        return self.parent

    def set_parent(self, node: Optional['AddressNode']) -> None:
        self.parent = node

    @property
    def visited(self) -> bool:
        return self._visited

    @visited.setter
    def visited(self, flag: bool) -> None:
        self._visited = flag

    @property
    def depth(self) -> int:
        return self._depth

    @depth.setter
    def depth(self, level: int) -> None:
        self._depth = level

    # 兼容按层级命名的调用方
    level = depth

    def reset_traversal(self) -> None:
        """清除遍历状态，为下一次搜索做准备"""
        self._visited = False
        self._depth = 0
        self._parent_ref = None

    def path_from_root(self) -> List['AddressNode']:
        """
        沿前驱链回溯到根节点

        Returns:
            从根节点到本节点的路径（含两端）

        Raises:
            ValidationError: 前驱链成环
        """
        path = []
        seen = set()
        node: Optional[AddressNode] = self

        while node is not None:
            if id(node) in seen:
                raise ValidationError(
                    message=f"前驱链成环: {self._text}",
                    field="parent",
                    value=node.text,
                    reason="parent_cycle"
                )
            seen.add(id(node))
            path.append(node)
            node = node.parent

        path.reverse()
        return path

    # ========== 邻接关系 ==========

    @property
    def neighbors(self) -> Set['AddressNode']:
        """
        获取相邻节点集合

        返回内部集合本身（无防御性拷贝），通过该引用的修改对本节点可见。
        """
        return self._neighbors

    def add_neighbor(self, node: 'AddressNode') -> None:
        """
        添加相邻节点，已存在时无影响

        Raises:
            ValidationError: 参数不是AddressNode
        """
        self._check_node(node)
        self._neighbors.add(node)

    def add_neighbors(self, nodes: Iterable['AddressNode']) -> None:
        """
        批量添加相邻节点

        先校验全部元素，任一元素无效则整个调用被拒绝，集合保持不变。

        Raises:
            ValidationError: 参数不可迭代或含有非AddressNode元素
        """
        try:
            candidates = list(nodes)
        except TypeError:
            raise ValidationError(
                message="相邻节点集合必须可迭代",
                field="nodes",
                value=repr(nodes),
                reason="not_iterable"
            )

        for candidate in candidates:
            self._check_node(candidate)

        self._neighbors.update(candidates)

    @staticmethod
    def _check_node(node: Any) -> None:
        if not isinstance(node, AddressNode):
            raise ValidationError(
                message=f"相邻节点必须是AddressNode: {type(node).__name__}",
                field="neighbor",
                value=repr(node),
                reason="invalid_type"
            )

    # ========== 比较 ==========

    def compare_to(self, other: 'AddressNode') -> int:
        """按编码值比较，返回 -1 / 0 / 1"""
        return compare_values(self._value, other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressNode):
            return False
        return self._value == other._value

    def __lt__(self, other: 'AddressNode') -> bool:
        if not isinstance(other, AddressNode):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    # ========== 表示 ==========

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于日志输出"""
        parent = self.parent
        return {
            'address': self._text,
            'value': self._value,
            'depth': self._depth,
            'visited': self._visited,
            'parent': parent.text if parent is not None else None,
            'neighbors': [n.text for n in sorted(self._neighbors)],
        }

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"AddressNode('{self._text}')"


def compare(a: AddressNode, b: AddressNode) -> int:
    """比较两个地址节点的编码值，返回 -1 / 0 / 1"""
    return a.compare_to(b)
