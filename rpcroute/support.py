"""Classification of JSON values by their JSON type."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["JsonType", "get_json_type"]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


class JsonType(Enum):
    """The kind of a JSON value, with integers split by range."""

    NULL = "Null"
    BOOL = "Bool"
    INTEGER = "Integer"
    UNSIGNED = "Unsigned"
    FLOAT = "Float"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"

    def __str__(self) -> str:
        return self.value


def get_json_type(value: Any) -> JsonType:
    """Return the JSON type of a decoded JSON value.

    Integers that fit a signed 64-bit range are ``INTEGER``, those that only
    fit an unsigned 64-bit range are ``UNSIGNED``; anything wider is treated
    as a floating point number, as a JSON parser without arbitrary precision
    would read it.
    """
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOL
    if isinstance(value, int):
        if _I64_MIN <= value <= _I64_MAX:
            return JsonType.INTEGER
        if 0 <= value <= _U64_MAX:
            return JsonType.UNSIGNED
        return JsonType.FLOAT
    if isinstance(value, float):
        return JsonType.FLOAT
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")