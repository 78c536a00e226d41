"""
邻接表导入器 - 从CSV/Excel读取拓扑连线
"""
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any, Optional

import pandas as pd

from .base_importer import DataImporter
from ...config.validator import ConfigValidator
from ...core.address import AddressNode
from ...core.topology import Topology
from ...exceptions import InvalidAddressSyntaxError, TopologyImportError, ValidationError

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = ['.xlsx', '.xls', '.xlsm']

DEFAULT_CONFIG = {
    'source_column': 'source',
    'target_column': 'target',
    'bidirectional': True,
    'skip_invalid_rows': True,
    'csv_delimiter': ',',
    'excel_sheet': 0,
}


class EdgeListImporter(DataImporter):
    """
    邻接表导入器

    文件每行描述一条连线（起点地址, 终点地址），例如traceroute相邻跳：

        source,target
        10.0.0.1,10.0.1.1
        10.0.1.1,192.168.3.7

    地址无效的行按配置跳过并记录，或中止整个导入。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        merged = dict(DEFAULT_CONFIG)
        merged.update(config or {})
        super().__init__(merged)

        self.source_column = self.config['source_column']
        self.target_column = self.config['target_column']
        self.bidirectional = self.config['bidirectional']
        self.skip_invalid_rows = self.config['skip_invalid_rows']

        # 统计信息
        self.stats = self._empty_statistics()

    def _validate_config(self):
        """验证配置参数"""
        try:
            self.config = ConfigValidator().validate_import_config(self.config)
        except ValidationError as e:
            raise TopologyImportError(f"导入配置无效: {e.message}") from e

    @staticmethod
    def _empty_statistics() -> Dict[str, Any]:
        return {
            'files_processed': 0,
            'rows_read': 0,
            'edges_added': 0,
            'rows_skipped': 0,
            'rejected_rows': []
        }

    # ============ 抽象方法实现 ============

    def validate_file(self, file_path: str) -> bool:
        """验证文件"""
        if not os.path.isfile(file_path):
            return False

        return ConfigValidator().validate_file_extension(Path(file_path).suffix)

    def extract_metadata(self, file_path: str) -> Dict[str, Any]:
        """提取文件元数据"""
        metadata = {
            'file_path': file_path,
            'file_name': Path(file_path).name,
            'import_time': datetime.now().isoformat(),
            'config': dict(self.config)
        }

        if os.path.exists(file_path):
            file_stat = os.stat(file_path)
            metadata.update({
                'file_size': file_stat.st_size,
                'modified_time': datetime.fromtimestamp(file_stat.st_mtime).isoformat()
            })

        return metadata

    def parse_data(self, file_path: str) -> List[Dict[str, Any]]:
        """
        读取文件中的连线

        Returns:
            每行一个字典: {'row': 文件行号, 'source': 起点文本, 'target': 终点文本}

        Raises:
            TopologyImportError: 文件无法读取或缺少列
        """
        if not self.validate_file(file_path):
            raise TopologyImportError(f"无效的文件: {file_path}", file_path=file_path)

        df = self._read_frame(file_path)

        missing = [c for c in (self.source_column, self.target_column) if c not in df.columns]
        if missing:
            raise TopologyImportError(
                f"缺少列: {', '.join(missing)} (现有列: {list(df.columns)})",
                file_path=file_path
            )

        rows = []
        for idx, record in df[[self.source_column, self.target_column]].iterrows():
            # 表头占第1行
            row_number = int(idx) + 2
            source = str(record[self.source_column]).strip()
            target = str(record[self.target_column]).strip()

            if not source and not target:
                self.stats['rows_skipped'] += 1
                continue

            rows.append({'row': row_number, 'source': source, 'target': target})

        self.stats['rows_read'] += len(rows)
        self.stats['files_processed'] += 1
        logger.info(f"读取 {Path(file_path).name}: {len(rows)} 行连线")
        return rows

    def build_topology(self, data: List[Dict[str, Any]], topology: Optional[Topology] = None) -> Topology:
        """
        把连线写入拓扑图

        Args:
            data: parse_data 的输出
            topology: 已有拓扑图，None时新建

        Returns:
            写入后的拓扑图

        Raises:
            TopologyImportError: skip_invalid_rows为False且遇到无效地址
        """
        topology = topology if topology is not None else Topology()

        for item in data:
            try:
                # 两端都解析成功后才写入，避免留下半条连线
                source = AddressNode(item['source'])
                target = AddressNode(item['target'])
            except InvalidAddressSyntaxError as e:
                if not self.skip_invalid_rows:
                    raise TopologyImportError(
                        f"第{item['row']}行地址无效: {e.address!r}",
                        row=item['row']
                    ) from e

                logger.warning(f"跳过第{item['row']}行: {e.message}")
                self.stats['rows_skipped'] += 1
                self.stats['rejected_rows'].append({
                    'row': item['row'],
                    'address': e.address,
                    'reason': e.reason
                })
                continue

            topology.connect(source, target, bidirectional=self.bidirectional)
            self.stats['edges_added'] += 1

        logger.info(
            f"拓扑构建完成: {len(topology)} 个节点, "
            f"新增 {self.stats['edges_added']} 条连线, 跳过 {self.stats['rows_skipped']} 行"
        )
        return topology

    # ============ 工具方法 ============

    def _read_frame(self, file_path: str) -> pd.DataFrame:
        """按扩展名读取为DataFrame，所有单元格按字符串处理"""
        suffix = Path(file_path).suffix.lower()

        try:
            if suffix in EXCEL_EXTENSIONS:
                df = pd.read_excel(
                    file_path,
                    sheet_name=self.config['excel_sheet'],
                    dtype=str,
                    keep_default_na=False
                )
            else:
                df = pd.read_csv(
                    file_path,
                    sep=self.config['csv_delimiter'],
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=False,
                    skipinitialspace=True
                )
        except (OSError, ValueError, pd.errors.ParserError) as e:
            raise TopologyImportError(f"读取文件失败: {e}", file_path=file_path) from e

        # 空行保留为空单元格，行号与文件物理行一一对应
        df = df.fillna("")
        df.columns = [str(c).strip() for c in df.columns]
        return df

    def get_import_statistics(self) -> Dict[str, Any]:
        """获取导入统计信息"""
        stats = self.stats.copy()
        stats['rejected_rows'] = list(self.stats['rejected_rows'])
        return stats

    def reset_statistics(self):
        """重置统计信息"""
        self.stats = self._empty_statistics()


# 导出
__all__ = ['EdgeListImporter']
