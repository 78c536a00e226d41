"""
网络拓扑地址图主入口
集成配置、地址节点、拓扑图和导入模块，提供统一的管理接口
"""

import logging
import os
from typing import Dict, Optional, Any
from datetime import datetime

from .config.settings import TopologySettings
from .core.address import AddressNode
from .core.topology import Topology
from .services.import_export import EdgeListImporter


class TopologySystem:
    """
    拓扑系统主类

    持有一个拓扑图；遍历算法由调用方实现，本类只负责
    构建、查询以及在两次遍历之间重置节点状态。
    """

    def __init__(
            self,
            config: Optional[Dict[str, Any]] = None,
            topology: Optional[Topology] = None
    ):
        """
        初始化系统

        Args:
            config: 系统配置字典
            topology: 已有拓扑图（默认新建空图）
        """
        # 加载配置
        self.settings = TopologySettings.from_dict(config) if config else TopologySettings()

        # 初始化日志
        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self._topology = topology if topology is not None else Topology()
        self._start_time = datetime.now()
        self._loaded_files = []

        self.logger.info(f"{self.settings.system_name} 初始化完成")

    def _setup_logging(self):
        """配置日志系统"""
        logging.basicConfig(
            level=getattr(logging, self.settings.log_level),
            format=self.settings.log_format,
            handlers=[logging.StreamHandler()]
        )

        if self.settings.log_file:
            self._attach_file_handler(self.settings.log_file)

    def _attach_file_handler(self, log_file: str) -> None:
        """为根日志器添加文件输出，同一文件只添加一次"""
        root = logging.getLogger()
        target = os.path.abspath(log_file)

        for handler in root.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
                return

        file_handler = logging.FileHandler(target, encoding='utf-8')
        file_handler.setLevel(getattr(logging, self.settings.log_level))
        file_handler.setFormatter(logging.Formatter(self.settings.log_format))
        root.addHandler(file_handler)

    @property
    def topology(self) -> Topology:
        return self._topology

    @property
    def name(self) -> str:
        return self.settings.system_name

    @property
    def version(self) -> str:
        return self.settings.version

    # ========== 拓扑构建 ==========

    def load(self, file_path: str) -> Dict[str, Any]:
        """
        从邻接表文件导入连线，合并进当前拓扑图

        Returns:
            本次导入的统计信息

        Raises:
            TopologyImportError: 文件无效或（不跳过无效行时）存在无效地址
        """
        importer = EdgeListImporter({
            'source_column': self.settings.source_column,
            'target_column': self.settings.target_column,
            'bidirectional': self.settings.bidirectional,
            'skip_invalid_rows': self.settings.skip_invalid_rows,
            'csv_delimiter': self.settings.csv_delimiter,
            'excel_sheet': self.settings.excel_sheet,
        })

        try:
            importer.import_data(file_path, self._topology)
        except Exception as e:
            self.logger.error(f"导入失败: {file_path}, 错误: {e}")
            raise

        stats = importer.get_import_statistics()
        self._loaded_files.append(file_path)
        self.logger.info(
            f"导入成功: {file_path} ({stats['edges_added']} 条连线, {stats['rows_skipped']} 行跳过)"
        )
        return stats

    def add_link(self, source: str, target: str, bidirectional: Optional[bool] = None) -> None:
        """手动添加一条连线"""
        if bidirectional is None:
            bidirectional = self.settings.bidirectional
        self._topology.connect(source, target, bidirectional=bidirectional)

    def node(self, address: str) -> AddressNode:
        """
        获取节点

        Raises:
            NodeNotFoundError: 节点不存在
        """
        return self._topology.require(address)

    def reset_traversal(self) -> None:
        """在新一轮遍历前重置所有节点的遍历状态"""
        self._topology.reset_traversal()
        self.logger.debug("遍历状态已重置")

    def get_system_info(self) -> Dict[str, Any]:
        """获取系统信息"""
        return {
            'system_name': self.settings.system_name,
            'version': self.settings.version,
            'uptime': str(datetime.now() - self._start_time),
            'node_count': len(self._topology),
            'edge_count': self._topology.edge_count(),
            'loaded_files': list(self._loaded_files),
        }
