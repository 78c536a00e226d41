"""
测试异常体系
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


def test_exception_creation():
    """测试异常创建"""
    from route_graph.exceptions import InvalidAddressSyntaxError

    error = InvalidAddressSyntaxError(
        address="256.0.0.1",
        reason="段值超出范围"
    )

    assert error.code == "INVALID_ADDRESS_SYNTAX"
    assert "256.0.0.1" in str(error)
    assert "段值超出范围" in str(error)
    assert str(error).startswith("[INVALID_ADDRESS_SYNTAX]")
    assert error.details["address"] == "256.0.0.1"
    assert error.details["reason"] == "段值超出范围"
    assert error.details["kind"] == "invalid address syntax"
    print("✓ 异常创建测试通过")


def test_exception_inheritance():
    """测试异常继承关系"""
    from route_graph.exceptions import (
        BaseError, TopologyError, AddressError, InvalidAddressSyntaxError, ParseError,
        NodeNotFoundError, TopologyImportError
    )

    error = InvalidAddressSyntaxError(None)
    assert isinstance(error, AddressError)
    assert isinstance(error, TopologyError)
    assert isinstance(error, BaseError)
    assert ParseError is InvalidAddressSyntaxError
    assert issubclass(NodeNotFoundError, TopologyError)
    assert issubclass(TopologyImportError, BaseError)
    assert not issubclass(TopologyImportError, TopologyError)
    print("✓ 异常继承关系测试通过")


def test_exception_to_dict():
    """测试序列化"""
    from route_graph.exceptions import TopologyImportError, ConfigError, ValidationError

    error = TopologyImportError("缺少列", file_path="edges.csv", row=3)
    data = error.to_dict()
    assert data["code"] == "TOPOLOGY_IMPORT_ERROR"
    assert data["message"] == "拓扑导入失败: 缺少列"
    assert data["details"] == {"file_path": "edges.csv", "row": 3}
    assert "timestamp" in data

    assert ConfigError("x", config_key="log_level").details == {"config_key": "log_level"}
    assert ValidationError("x", field="f").details["field"] == "f"


def test_parse_error_raised_by_node():
    """构造节点时抛出的就是解析错误"""
    from route_graph import AddressNode, ParseError

    try:
        AddressNode("1.2.3")
        assert False, "应该抛出异常"
    except ParseError as e:
        assert e.address == "1.2.3"
        assert "段数" in e.reason


if __name__ == "__main__":
    test_exception_creation()
    test_exception_inheritance()
    test_exception_to_dict()
    test_parse_error_raised_by_node()
    print("所有测试通过！")
