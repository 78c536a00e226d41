"""
网络拓扑地址图异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 拓扑结构相关异常 ====================
class TopologyError(BaseError):
    """拓扑结构错误基类"""
    pass


class NodeNotFoundError(TopologyError):
    """节点不存在"""
    def __init__(self, address: Optional[str] = None, **kwargs):
        details = {"address": address} if address else {}
        message = "节点不存在"
        if address:
            message += f": {address}"
        super().__init__(message, code="NODE_NOT_FOUND", details=details, **kwargs)


# ==================== 地址相关异常 ====================
class AddressError(TopologyError):
    """地址错误"""
    pass


class InvalidAddressSyntaxError(AddressError):
    """点分十进制地址语法无效"""

    kind = "invalid address syntax"

    def __init__(self, address: Any, reason: Optional[str] = None, **kwargs):
        self.address = address
        self.reason = reason
        details = {"address": address, "reason": reason, "kind": self.kind}
        message = f"无效的地址语法: {address!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, code="INVALID_ADDRESS_SYNTAX", details=details, **kwargs)


# 解析阶段唯一的错误类型
ParseError = InvalidAddressSyntaxError


# ==================== 导入相关异常 ====================
class TopologyImportError(BaseError):
    """拓扑数据导入失败"""
    def __init__(self, message: str, file_path: Optional[str] = None, row: Optional[int] = None, **kwargs):
        details = {"file_path": file_path, "row": row}
        super().__init__(
            message=f"拓扑导入失败: {message}",
            code="TOPOLOGY_IMPORT_ERROR",
            details=details,
            **kwargs
        )
