"""
网络拓扑地址图 - 点分十进制地址节点与邻接关系
"""

__version__ = "1.0.0"

from .core.address import AddressNode, compare
from .core.topology import Topology
from .exceptions import InvalidAddressSyntaxError, ParseError
from .system import TopologySystem

__all__ = [
    'AddressNode',
    'compare',
    'Topology',
    'InvalidAddressSyntaxError',
    'ParseError',
    'TopologySystem',
]
