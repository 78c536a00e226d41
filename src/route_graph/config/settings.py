"""
系统配置设置
"""
import os
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, asdict

from ..exceptions import ConfigError


@dataclass
class TopologySettings:
    """
    系统配置类
    使用dataclass确保配置的类型安全
    """

    # 系统基本配置
    system_name: str = "网络拓扑地址图"
    version: str = "1.0.0"

    # 日志配置
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 导入配置
    source_column: str = "source"
    target_column: str = "target"
    bidirectional: bool = True
    skip_invalid_rows: bool = True
    csv_delimiter: str = ","
    excel_sheet: Union[int, str] = 0

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()
        self._set_defaults()

    def _validate_settings(self):
        """验证配置值"""
        # 验证日志级别
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level",
                context={"valid_values": valid_log_levels}
            )

        # 验证列名
        for key in ("source_column", "target_column"):
            column = getattr(self, key)
            if not isinstance(column, str) or not column.strip():
                raise ConfigError(
                    message=f"列名必须是非空字符串: {column!r}",
                    config_key=key
                )

        if self.source_column == self.target_column:
            raise ConfigError(
                message=f"起点列与终点列不能相同: {self.source_column}",
                config_key="target_column"
            )

        # 验证分隔符
        if not isinstance(self.csv_delimiter, str) or len(self.csv_delimiter) != 1:
            raise ConfigError(
                message=f"CSV分隔符必须是单个字符: {self.csv_delimiter!r}",
                config_key="csv_delimiter"
            )

        # 验证工作表
        if isinstance(self.excel_sheet, bool) or not isinstance(self.excel_sheet, (int, str)):
            raise ConfigError(
                message=f"Excel工作表必须是表名或序号: {self.excel_sheet!r}",
                config_key="excel_sheet"
            )

    def _set_defaults(self):
        """设置默认值"""
        self.log_level = self.log_level.upper()

        # 确保日志目录存在
        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'TopologySettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
