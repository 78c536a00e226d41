"""
测试地址模块 - 语法校验、编码、比较与哈希
"""
import sys
import os

import pytest

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from route_graph.core.address import AddressNode, compare, is_valid_address, parse_octets, encode_octets
from route_graph.exceptions import InvalidAddressSyntaxError, ParseError


VALID_ADDRESSES = [
    "0.0.0.0",
    "255.255.255.255",
    "10.0.0.1",
    "192.168.0.1",
    "1.22.199.249",
    "100.200.250.9",
]

INVALID_ADDRESSES = [
    None,
    "",
    "256.1.1.1",
    "1.256.1.1",
    "1.2.3",
    "1.2.3.4.5",
    "a.b.c.d",
    "1.2.3.x",
    "01.2.3.4",
    "1.2.3.00",
    "1..2.3",
    "1.2.3.",
    ".1.2.3",
    "-1.2.3.4",
    " 1.2.3.4",
    "1.2.3.4 ",
    "1.2.3.4\n",
    "1,2,3,4",
    "１.2.3.4",
    "1000.1.1.1",
    12345,
]


@pytest.mark.parametrize("text", VALID_ADDRESSES)
def test_valid_address_round_trip(text):
    """有效地址构造成功，text保持原样"""
    node = AddressNode(text)
    assert node.text == text
    assert str(node) == text
    assert is_valid_address(text)


@pytest.mark.parametrize("text", INVALID_ADDRESSES)
def test_invalid_address_rejected(text):
    """无效地址构造失败"""
    assert not is_valid_address(text)
    with pytest.raises(InvalidAddressSyntaxError) as exc_info:
        AddressNode(text)

    error = exc_info.value
    assert error.code == "INVALID_ADDRESS_SYNTAX"
    assert error.kind == "invalid address syntax"
    assert error.address == text


def test_reject_reasons():
    """错误信息给出具体原因"""
    cases = [
        ("256.1.1.1", "超出范围"),
        ("1.2.3", "段数"),
        ("1.2.3.4.5", "段数"),
        ("a.b.c.d", "不是数字"),
        ("01.2.3.4", "前导零"),
        ("", "不能为空"),
        (None, "不能为空"),
    ]

    for text, expected in cases:
        with pytest.raises(ParseError) as exc_info:
            parse_octets(text)
        assert expected in str(exc_info.value), f"{text!r}: {exc_info.value}"

    print("✓ 错误原因测试通过")


def test_numeric_value():
    """测试32位编码，高位在前"""
    assert AddressNode("0.0.0.0").value == 0
    assert AddressNode("0.0.0.1").value == 1
    assert AddressNode("0.0.1.0").value == 256
    assert AddressNode("0.1.0.0").value == 65536
    assert AddressNode("1.0.0.0").value == 16777216
    assert AddressNode("10.0.0.1").value == 167772161
    assert AddressNode("192.168.0.1").value == 3232235521
    assert AddressNode("255.255.255.255").value == 2 ** 32 - 1

    assert parse_octets("192.168.0.1") == (192, 168, 0, 1)
    assert encode_octets((192, 168, 0, 1)) == 3232235521
    assert AddressNode("172.16.5.4").octets == (172, 16, 5, 4)
    print("✓ 编码测试通过")


def test_ordering():
    """测试排序与比较"""
    low = AddressNode("0.0.0.1")
    high = AddressNode("0.0.1.0")

    assert low < high
    assert high > low
    assert low <= high
    assert high >= low
    assert compare(low, high) == -1
    assert compare(high, low) == 1
    assert compare(low, AddressNode("0.0.0.1")) == 0
    assert low.compare_to(high) == -1

    minimum = AddressNode("0.0.0.0")
    maximum = AddressNode("255.255.255.255")
    others = [AddressNode(text) for text in VALID_ADDRESSES]
    assert min(others) == minimum
    assert max(others) == maximum

    # 按数值而不是按字符串排序
    ordered = sorted([AddressNode("10.0.0.10"), AddressNode("10.0.0.9"), AddressNode("9.255.255.255")])
    assert [n.text for n in ordered] == ["9.255.255.255", "10.0.0.9", "10.0.0.10"]
    print("✓ 排序测试通过")


def test_ordering_with_other_types():
    """与其他类型比较"""
    node = AddressNode("1.2.3.4")

    assert node != "1.2.3.4"
    assert not (node == 16909060)
    assert node != None  # noqa: E711

    with pytest.raises(TypeError):
        node < "1.2.3.5"


def test_equality_and_hash():
    """相等的节点哈希一致，可作为集合/字典键"""
    first = AddressNode("10.1.2.3")
    second = AddressNode("10.1.2.3")

    assert first == second
    assert first is not second
    assert hash(first) == hash(second)
    assert hash(first) == hash(first.value)

    # 构造顺序不影响哈希
    later = [AddressNode(t) for t in ("10.1.2.4", "10.1.2.3")]
    assert hash(later[1]) == hash(first)

    assert len({first, second}) == 1
    lookup = {first: "hop"}
    assert lookup[second] == "hop"
    print("✓ 相等与哈希测试通过")


def test_hash_spreads_values():
    """不同地址的哈希不再集中到同一个值"""
    nodes = [AddressNode(f"10.0.{i // 256}.{i % 256}") for i in range(1000)]
    assert len({hash(n) for n in nodes}) == 1000
    assert len(set(nodes)) == 1000


def test_traversal_state_not_part_of_identity():
    """遍历状态不影响相等、排序和哈希"""
    node = AddressNode("10.9.8.7")
    twin = AddressNode("10.9.8.7")
    before = hash(node)

    node.visited = True
    node.depth = 5
    node.parent = AddressNode("0.0.0.0")
    node.add_neighbor(AddressNode("1.1.1.1"))

    assert node == twin
    assert hash(node) == before == hash(twin)
    assert compare(node, twin) == 0
