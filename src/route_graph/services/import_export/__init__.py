"""
拓扑数据导入
"""

from .base_importer import DataImporter
from .edge_list_importer import EdgeListImporter

__all__ = ['DataImporter', 'EdgeListImporter']
