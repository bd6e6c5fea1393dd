"""JSON-RPC request identifiers and generators for fresh ones."""

from __future__ import annotations

import base64
import os
import time
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .parsing_errors import IdInvalid

__all__ = ["IdSchemeKind", "IdSchemeEncoding", "RpcId"]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def _uuid_v7_bytes() -> bytes:
    timestamp_ms = time.time_ns() // 1_000_000
    random_bits = int.from_bytes(os.urandom(10), "big")
    rand_a = random_bits & 0xFFF
    rand_b = (random_bits >> 12) & ((1 << 62) - 1)
    value = (
        (timestamp_ms & ((1 << 48) - 1)) << 80
        | 0x7 << 76
        | rand_a << 64
        | 0b10 << 62
        | rand_b
    )
    return value.to_bytes(16, "big")


def _base58(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_BASE58_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


class IdSchemeKind(Enum):
    """How the bytes of a new identifier are generated."""

    UUID_V4 = "uuid_v4"
    UUID_V7 = "uuid_v7"

    def generate(self) -> bytes:
        """Return the 16 bytes of a fresh identifier."""
        if self is IdSchemeKind.UUID_V4:
            return uuid.uuid4().bytes
        return _uuid_v7_bytes()


class IdSchemeEncoding(Enum):
    """How identifier bytes are turned into text."""

    STANDARD = "standard"
    BASE64 = "base64"
    BASE64_URL_NO_PAD = "base64url_nopad"
    BASE58 = "base58"

    def encode(self, data: bytes) -> str:
        """Encode ``data``; the standard form yields ``""`` if it is not a UUID."""
        if self is IdSchemeEncoding.STANDARD:
            try:
                return str(uuid.UUID(bytes=bytes(data)))
            except ValueError:
                return ""
        if self is IdSchemeEncoding.BASE64:
            return base64.b64encode(data).decode("ascii")
        if self is IdSchemeEncoding.BASE64_URL_NO_PAD:
            return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
        return _base58(bytes(data))


IdValue = Union[str, int, None]


@dataclass(frozen=True)
class RpcId:
    """A JSON-RPC id: a string, a signed 64-bit integer, or null (``None``)."""

    value: IdValue = None

    def __post_init__(self) -> None:
        value = self.value
        if value is None or isinstance(value, str):
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"RpcId must be str, int or None, not {type(value).__name__}")
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"RpcId number {value} is out of the 64-bit signed range")

    # -- Generated ids

    @classmethod
    def from_scheme(cls, kind: IdSchemeKind, encoding: IdSchemeEncoding) -> RpcId:
        """Generate a new string id with the given scheme and encoding."""
        return cls(encoding.encode(kind.generate()))

    @classmethod
    def new_uuid_v4(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V4, IdSchemeEncoding.STANDARD)

    @classmethod
    def new_uuid_v4_base64(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V4, IdSchemeEncoding.BASE64)

    @classmethod
    def new_uuid_v4_base64url(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V4, IdSchemeEncoding.BASE64_URL_NO_PAD)

    @classmethod
    def new_uuid_v4_base58(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V4, IdSchemeEncoding.BASE58)

    @classmethod
    def new_uuid_v7(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V7, IdSchemeEncoding.STANDARD)

    @classmethod
    def new_uuid_v7_base64(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V7, IdSchemeEncoding.BASE64)

    @classmethod
    def new_uuid_v7_base64url(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V7, IdSchemeEncoding.BASE64_URL_NO_PAD)

    @classmethod
    def new_uuid_v7_base58(cls) -> RpcId:
        return cls.from_scheme(IdSchemeKind.UUID_V7, IdSchemeEncoding.BASE58)

    # -- JSON conversions

    @classmethod
    def from_value(cls, value: Any) -> RpcId:
        """Build an id from a decoded JSON value, raising ``IdInvalid`` if it cannot be one."""
        if value is None or isinstance(value, str):
            return cls(value)
        if isinstance(value, bool):
            raise IdInvalid(actual=repr(value), cause="ID must be a String, Number, or Null")
        if isinstance(value, int):
            if _I64_MIN <= value <= _I64_MAX:
                return cls(value)
            raise IdInvalid(actual=str(value), cause="Number is not a valid i64")
        if isinstance(value, float):
            raise IdInvalid(actual=repr(value), cause="Number is not a valid i64")
        raise IdInvalid(actual=repr(value), cause="ID must be a String, Number, or Null")

    def to_value(self) -> IdValue:
        """Return the id as a JSON value."""
        return self.value

    def is_null(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        if self.value is None:
            return "null"
        return str(self.value)