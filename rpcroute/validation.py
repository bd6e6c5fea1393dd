"""Checks shared by request and notification parsing."""

from __future__ import annotations

from typing import Any, Mapping

from .parsing_errors import ParamsInvalidType
from .support import get_json_type

__all__ = ["is_valid_version", "parse_params"]

JSONRPC_VERSION = "2.0"


def is_valid_version(value: Any) -> bool:
    """Tell whether a ``jsonrpc`` member value is the string ``"2.0"``."""
    return isinstance(value, str) and value == JSONRPC_VERSION


def parse_params(obj: Mapping[str, Any]) -> Any:
    """Return the ``params`` member of a message object.

    Absent params give ``None``; present params must be an array or an
    object, otherwise ``ParamsInvalidType`` is raised.
    """
    if "params" not in obj:
        return None
    params = obj["params"]
    if isinstance(params, (list, tuple, dict)):
        return params
    raise ParamsInvalidType(actual_type=str(get_json_type(params)))