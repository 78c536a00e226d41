"""
配置包
"""

from .settings import TopologySettings
from .validator import ConfigValidator

__all__ = ['TopologySettings', 'ConfigValidator']
