"""
核心模块包
包含地址节点与拓扑图实现
"""

# 导入地址模块
from .address import AddressNode, compare

# 导入拓扑模块
from .topology import Topology

__all__ = [
    # 地址模块
    'AddressNode',
    'compare',

    # 拓扑模块
    'Topology',
]
