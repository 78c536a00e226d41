"""
拓扑模块 - 按编码值索引的节点集合
"""

from .graph import Topology

__all__ = ['Topology']
