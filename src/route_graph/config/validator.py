"""
配置验证器
"""
from typing import Dict, Any, List

from ..exceptions import ValidationError, ConfigError
from ..core.address.parser import is_valid_address, parse_octets


class ConfigValidator:
    """配置验证器"""

    SUPPORTED_EXTENSIONS = ['.csv', '.txt', '.xlsx', '.xls', '.xlsm']

    def validate_import_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        验证并清理导入配置

        Args:
            config: 导入配置字典

        Returns:
            清理后的配置

        Raises:
            ValidationError: 配置项无效
        """
        if not isinstance(config, dict):
            raise ConfigError(f"导入配置必须是字典: {type(config).__name__}")

        validated = {}

        # 列名（必需）
        for key in ('source_column', 'target_column'):
            if key not in config:
                raise ValidationError(
                    message=f"缺少必需配置项: {key}",
                    field=key,
                    reason="required_field_missing"
                )

            column = config[key]
            if not self._validate_string(column):
                raise ValidationError(
                    message="列名必须是1-100个字符的字符串",
                    field=key,
                    value=column,
                    reason="invalid_name"
                )
            validated[key] = column

        if validated['source_column'] == validated['target_column']:
            raise ValidationError(
                message="起点列与终点列不能相同",
                field="target_column",
                value=validated['target_column'],
                reason="duplicate_column"
            )

        # 分隔符（可选）
        if 'csv_delimiter' in config:
            delimiter = config['csv_delimiter']
            if not isinstance(delimiter, str) or len(delimiter) != 1:
                raise ValidationError(
                    message="CSV分隔符必须是单个字符",
                    field="csv_delimiter",
                    value=delimiter,
                    reason="invalid_delimiter"
                )
            validated['csv_delimiter'] = delimiter

        # 布尔开关（可选）
        for key in ('bidirectional', 'skip_invalid_rows'):
            if key in config:
                validated[key] = bool(config[key])

        # 工作表（可选）：单个表名或序号
        if 'excel_sheet' in config:
            sheet = config['excel_sheet']
            if isinstance(sheet, bool) or not isinstance(sheet, (int, str)):
                raise ValidationError(
                    message="Excel工作表必须是表名或序号",
                    field="excel_sheet",
                    value=sheet,
                    reason="invalid_sheet"
                )
            validated['excel_sheet'] = sheet

        return validated

    def validate_address(self, address: Any) -> bool:
        """验证单个地址"""
        if not isinstance(address, str):
            raise ValidationError(
                message="地址必须是字符串",
                field="address",
                value=address,
                reason="invalid_type"
            )

        if not is_valid_address(address):
            raise ValidationError(
                message="地址格式无效",
                field="address",
                value=address,
                reason="invalid_format"
            )

        return True

    def validate_address_list(self, addresses: List[Any]) -> List[str]:
        """验证地址列表，返回去重后的地址（保持原顺序）"""
        validated = []
        seen = set()

        for address in addresses:
            self.validate_address(address)
            key = parse_octets(address)
            if key in seen:
                continue
            seen.add(key)
            validated.append(address)

        return validated

    def validate_file_extension(self, suffix: str) -> bool:
        """验证文件扩展名"""
        return suffix.lower() in self.SUPPORTED_EXTENSIONS

    def _validate_string(self, value: Any, min_len: int = 1, max_len: int = 100) -> bool:
        """验证字符串"""
        return isinstance(value, str) and min_len <= len(value.strip()) and len(value) <= max_len
