import pytest

from rpcroute.parsing_errors import (
    IdInvalid,
    IdMissing,
    MethodInvalid,
    MethodInvalidType,
    MethodMissing,
    NotificationHasId,
    ParamsInvalidType,
    ParseFailure,
    RequestInvalidType,
    RpcRequestParsingError,
    VersionInvalid,
    VersionMissing,
)


def test_version_invalid_keeps_context():
    err = VersionInvalid(id=7, method="get_task", version="1.0")
    assert (err.id, err.method, err.version) == (7, "get_task", "1.0")
    assert str(err).startswith("VersionInvalid")
    assert "'get_task'" in str(err)


def test_notification_has_id_fields():
    err = NotificationHasId(method="updateState", id=888)
    assert err.method == "updateState"
    assert err.id == 888
    assert "888" in str(err)


def test_id_invalid_fields():
    err = IdInvalid(actual="true", cause="ID must be a String, Number, or Null")
    assert err.actual == "true"
    assert err.cause == "ID must be a String, Number, or Null"


@pytest.mark.parametrize(
    "err",
    [
        RequestInvalidType("String"),
        ParamsInvalidType("String"),
        VersionMissing(None, "m"),
        VersionInvalid(None, "m", "1.0"),
        MethodMissing(1),
        MethodInvalidType(1, 123),
        NotificationHasId("m", 1),
        MethodInvalid("m"),
        IdMissing("m"),
        IdInvalid("x", "y"),
        ParseFailure("bad"),
    ],
)
def test_all_variants_catchable_as_base(err):
    with pytest.raises(RpcRequestParsingError) as info:
        raise err
    assert info.value is err
    assert str(err).startswith(type(err).__name__)


def test_defaults_are_none():
    err = VersionMissing()
    assert err.id is None
    assert err.method is None
    assert IdMissing().method is None
    assert MethodMissing().id is None


def test_params_type_kept():
    err = ParamsInvalidType(actual_type="String")
    assert err.actual_type == "String"
    assert repr(err) == str(err)