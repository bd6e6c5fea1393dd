import pytest

from rpcroute.parsing_errors import ParamsInvalidType
from rpcroute.support import JsonType
from rpcroute.validation import is_valid_version, parse_params


def test_valid_version():
    assert is_valid_version("2.0") is True


@pytest.mark.parametrize("value", ["1.0", 2.0, None, "", "2.0 ", ["2.0"]])
def test_invalid_version(value):
    assert is_valid_version(value) is False


def test_params_absent():
    assert parse_params({"method": "ping"}) is None


def test_params_array_and_object():
    assert parse_params({"params": ["user1", "user2"]}) == ["user1", "user2"]
    assert parse_params({"params": {"value": 123}}) == {"value": 123}


def test_params_string_rejected():
    with pytest.raises(ParamsInvalidType) as info:
        parse_params({"params": "not-array-or-object"})
    assert info.value.actual_type == "String"


@pytest.mark.parametrize(
    ("value", "kind"),
    [(None, JsonType.NULL), (5, JsonType.INTEGER), (True, JsonType.BOOL)],
)
def test_params_scalar_rejected(value, kind):
    with pytest.raises(ParamsInvalidType) as info:
        parse_params({"params": value})
    assert info.value.actual_type == str(kind)


def test_params_not_removed():
    obj = {"params": [1]}
    parse_params(obj)
    assert obj == {"params": [1]}