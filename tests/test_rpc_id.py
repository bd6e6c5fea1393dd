import base64
import json
import uuid

import pytest

from rpcroute.parsing_errors import IdInvalid
from rpcroute.rpc_id import IdSchemeEncoding, IdSchemeKind, RpcId

_BASE58_CHARS = set("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")


@pytest.mark.parametrize(
    ("rpc_id", "expected"),
    [
        (RpcId("id-1"), "id-1"),
        (RpcId(123), 123),
        (RpcId(None), None),
        (RpcId(""), ""),
    ],
)
def test_rpc_id_ser_de(rpc_id, expected):
    value = rpc_id.to_value()
    assert value == expected
    assert json.loads(json.dumps(value)) == expected
    assert RpcId.from_value(json.loads(json.dumps(value))) == rpc_id
    assert RpcId.from_value(value) == rpc_id


@pytest.mark.parametrize("value", [True, 123.45, [1, 2], {"a": 1}])
def test_rpc_id_from_value_invalid(value):
    with pytest.raises(IdInvalid):
        RpcId.from_value(value)


def test_from_value_float_cause():
    with pytest.raises(IdInvalid) as info:
        RpcId.from_value(123.45)
    assert info.value.cause == "Number is not a valid i64"


def test_from_value_non_scalar_cause():
    with pytest.raises(IdInvalid) as info:
        RpcId.from_value([1, 2])
    assert info.value.cause == "ID must be a String, Number, or Null"


def test_from_value_out_of_range():
    with pytest.raises(IdInvalid):
        RpcId.from_value(2**63)


def test_rpc_id_to_value():
    assert RpcId("hello").to_value() == "hello"
    assert RpcId(42).to_value() == 42
    assert RpcId(None).to_value() is None


def test_rpc_id_from_impls():
    assert RpcId("test_str") == RpcId.from_value("test_str")
    assert RpcId(100).value == 100
    assert RpcId(200) == RpcId.from_value(200)
    assert RpcId(300) != RpcId("300")


def test_rpc_id_default():
    assert RpcId() == RpcId(None)
    assert RpcId().is_null()
    assert not RpcId(0).is_null()


def test_display():
    assert str(RpcId("abc")) == "abc"
    assert str(RpcId(42)) == "42"
    assert str(RpcId()) == "null"


def test_constructor_rejects_bad_types():
    with pytest.raises(TypeError):
        RpcId(True)
    with pytest.raises(TypeError):
        RpcId(1.5)
    with pytest.raises(ValueError):
        RpcId(2**63)


def test_hashable():
    assert len({RpcId(1), RpcId(1), RpcId("1"), RpcId()}) == 3


def test_uuid_v4_standard():
    rpc_id = RpcId.new_uuid_v4()
    parsed = uuid.UUID(rpc_id.value)
    assert parsed.version == 4
    assert str(parsed) == rpc_id.value


def test_uuid_v7_standard():
    parsed = uuid.UUID(RpcId.new_uuid_v7().value)
    assert parsed.version == 7
    assert parsed.variant == uuid.RFC_4122


def test_uuid_v7_is_time_ordered():
    first = uuid.UUID(RpcId.new_uuid_v7().value).int >> 80
    second = uuid.UUID(RpcId.new_uuid_v7().value).int >> 80
    assert first <= second


@pytest.mark.parametrize("factory", [RpcId.new_uuid_v4_base64, RpcId.new_uuid_v7_base64])
def test_base64_ids(factory):
    text = factory().value
    assert len(base64.b64decode(text)) == 16
    assert text.endswith("==")


@pytest.mark.parametrize("factory", [RpcId.new_uuid_v4_base64url, RpcId.new_uuid_v7_base64url])
def test_base64url_ids(factory):
    text = factory().value
    assert "=" not in text
    assert len(base64.urlsafe_b64decode(text + "==")) == 16


@pytest.mark.parametrize("factory", [RpcId.new_uuid_v4_base58, RpcId.new_uuid_v7_base58])
def test_base58_ids(factory):
    text = factory().value
    assert set(text) <= _BASE58_CHARS
    assert 16 <= len(text) <= 22


def test_uuid_ids_are_unique():
    values = {RpcId.new_uuid_v4().value for _ in range(10)}
    assert len(values) == 10


def test_generate_lengths():
    assert len(IdSchemeKind.UUID_V4.generate()) == 16
    assert len(IdSchemeKind.UUID_V7.generate()) == 16


def test_encode_base58_vectors():
    assert IdSchemeEncoding.BASE58.encode(b"") == ""
    assert IdSchemeEncoding.BASE58.encode(b"\x00\x00") == "11"
    assert IdSchemeEncoding.BASE58.encode(b"Hello World!") == "2NEpo7TZRRrLZSi2U"


def test_encode_standard_non_uuid_bytes_is_empty():
    assert IdSchemeEncoding.STANDARD.encode(b"\x01\x02") == ""


def test_encode_standard_round_trip():
    data = uuid.uuid4().bytes
    assert uuid.UUID(IdSchemeEncoding.STANDARD.encode(data)).bytes == data


def test_from_scheme():
    rpc_id = RpcId.from_scheme(IdSchemeKind.UUID_V4, IdSchemeEncoding.BASE64_URL_NO_PAD)
    assert len(base64.urlsafe_b64decode(rpc_id.value + "==")) == 16