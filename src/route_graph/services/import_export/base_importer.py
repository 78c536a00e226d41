"""
拓扑导入器基类

导入分三步：检查文件 -> 读出连线记录 -> 把连线写入拓扑图。
子类只决定文件格式和记录结构，写入时必须经过 Topology，
保证同一地址在图中只有一个节点。
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional

from ...core.topology import Topology
from ...exceptions import TopologyImportError

logger = logging.getLogger(__name__)


class DataImporter(ABC):
    """拓扑导入器抽象基类"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self._validate_config()

    def _validate_config(self):
        """校验导入配置，子类按需覆盖；配置无效时抛出TopologyImportError"""
        pass

    @abstractmethod
    def validate_file(self, file_path: str) -> bool:
        """文件存在且格式受支持时返回True"""
        pass

    @abstractmethod
    def extract_metadata(self, file_path: str) -> Dict[str, Any]:
        """文件名、大小、修改时间等，仅用于记录来源"""
        pass

    @abstractmethod
    def parse_data(self, file_path: str) -> List[Dict[str, Any]]:
        """
        读出连线记录

        Returns:
            每条记录至少包含 'row'（文件行号）、'source'、'target'（地址文本），
            地址此时尚未校验
        """
        pass

    @abstractmethod
    def build_topology(self, data: List[Dict[str, Any]], topology: Optional[Topology] = None) -> Topology:
        """
        把连线记录写入拓扑图

        Args:
            data: parse_data 的输出
            topology: 合并目标，None时新建

        Returns:
            写入后的拓扑图（传入时即为同一对象）
        """
        pass

    def import_data(self, file_path: str, topology: Optional[Topology] = None) -> Topology:
        """
        从文件导入连线并合并进拓扑图

        Raises:
            TopologyImportError: 文件不存在、格式不支持或内容无法解析
        """
        if not self.validate_file(file_path):
            raise TopologyImportError(f"文件验证失败: {file_path}", file_path=file_path)

        metadata = self.extract_metadata(file_path)
        logger.debug(f"开始导入: {metadata['file_name']} ({metadata.get('file_size', 0)} 字节)")

        records = self.parse_data(file_path)
        return self.build_topology(records, topology)
