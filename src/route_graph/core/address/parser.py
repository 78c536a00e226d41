"""
点分十进制地址解析 - 语法校验与32位编码
"""
import re
from typing import Any, Tuple

from ...exceptions import InvalidAddressSyntaxError

# 单段: 一位数，或不带前导零的两位/三位数，且不超过255
OCTET_PATTERN = r"([0-9]|[1-9][0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])"

ADDRESS_PATTERN = r"^(" + OCTET_PATTERN + r"(\." + OCTET_PATTERN + r"){3})$"

_ADDRESS_RE = re.compile(ADDRESS_PATTERN)

OCTET_COUNT = 4
OCTET_BITS = 8
MAX_VALUE = (1 << (OCTET_COUNT * OCTET_BITS)) - 1


def is_valid_address(text: Any) -> bool:
    """判断输入是否符合点分十进制语法"""
    # fullmatch: "$" 会放过结尾的换行符
    return isinstance(text, str) and _ADDRESS_RE.fullmatch(text) is not None


def _reject_reason(text: Any) -> str:
    """给出校验失败的具体原因，仅用于错误信息"""
    if text is None:
        return "地址不能为空"
    if not isinstance(text, str):
        return f"地址必须是字符串，实际为 {type(text).__name__}"
    if not text:
        return "地址不能为空"

    parts = text.split('.')
    if len(parts) != OCTET_COUNT:
        return f"段数必须为{OCTET_COUNT}: 实际 {len(parts)}"

    for i, part in enumerate(parts):
        if not part.isdigit() or not part.isascii():
            return f"第{i + 1}段不是数字: {part!r}"
        if int(part) > 255:
            return f"第{i + 1}段值超出范围: {part} (允许: 0-255)"
        if len(part) > 1 and part[0] == '0':
            return f"第{i + 1}段含有前导零: {part}"

    return "格式不符合点分十进制语法"


def parse_octets(text: Any) -> Tuple[int, int, int, int]:
    """
    校验并拆分地址字符串

    Args:
        text: 点分十进制地址，如 "192.168.0.1"

    Returns:
        四个段值组成的元组

    Raises:
        InvalidAddressSyntaxError: 输入不符合语法
    """
    if not is_valid_address(text):
        raise InvalidAddressSyntaxError(address=text, reason=_reject_reason(text))

    a, b, c, d = (int(part) for part in text.split('.'))
    return a, b, c, d


def encode_octets(octets: Tuple[int, ...]) -> int:
    """按高位在前的顺序把每段编码为8位并拼接成32位无符号整数"""
    value = 0
    for octet in octets:
        value = (value << OCTET_BITS) | octet
    return value


def compare_values(left: int, right: int) -> int:
    """比较两个编码值，返回 -1 / 0 / 1"""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
