"""
遍历节点接口定义
"""
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set


class ITraversalNode(ABC):
    """
    遍历节点接口 - 外部广度优先搜索所依赖的节点行为

    身份字段（value, text）决定相等、排序与哈希；
    遍历字段（parent, visited, depth）由遍历方在每次搜索中读写。
    """

    @property
    @abstractmethod
    def value(self) -> int:
        """32位编码值"""
        pass

    @property
    @abstractmethod
    def text(self) -> str:
        """原始点分十进制文本"""
        pass

    @property
    @abstractmethod
    def parent(self) -> Optional['ITraversalNode']:
        """最近一次遍历中到达本节点的前驱"""
        pass

    @parent.setter
    @abstractmethod
    def parent(self, node: Optional['ITraversalNode']) -> None:
        """设置前驱"""
        pass

    @property
    @abstractmethod
    def visited(self) -> bool:
        """访问标记"""
        pass

    @visited.setter
    @abstractmethod
    def visited(self, flag: bool) -> None:
        """设置访问标记"""
        pass

    @property
    @abstractmethod
    def depth(self) -> int:
        """遍历树中的层级（根为0）"""
        pass

    @depth.setter
    @abstractmethod
    def depth(self, level: int) -> None:
        """设置层级"""
        pass

    @property
    @abstractmethod
    def neighbors(self) -> Set['ITraversalNode']:
        """相邻节点集合（实时引用）"""
        pass

    @abstractmethod
    def add_neighbor(self, node: 'ITraversalNode') -> None:
        """添加相邻节点"""
        pass

    @abstractmethod
    def add_neighbors(self, nodes: Iterable['ITraversalNode']) -> None:
        """批量添加相邻节点"""
        pass

    @abstractmethod
    def reset_traversal(self) -> None:
        """清除遍历状态"""
        pass
