"""
地址模块 - 点分十进制地址解析与地址节点
"""

from .parser import ADDRESS_PATTERN, is_valid_address, parse_octets, encode_octets
from .node import AddressNode, compare

__all__ = [
    'ADDRESS_PATTERN',
    'is_valid_address',
    'parse_octets',
    'encode_octets',
    'AddressNode',
    'compare',
]
