"""
接口定义包
"""

from .inode import ITraversalNode

__all__ = [
    'ITraversalNode',
]
