"""The JSON-RPC notification object: a request that carries no id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .parsing_errors import (
    MethodInvalidType,
    MethodMissing,
    NotificationHasId,
    RequestInvalidType,
    VersionInvalid,
    VersionMissing,
)
from .request import RpcRequest
from .support import get_json_type
from .validation import JSONRPC_VERSION, is_valid_version, parse_params

__all__ = ["RpcNotification"]


@dataclass
class RpcNotification:
    """A JSON-RPC notification: a method name and optional params, no id."""

    method: str
    params: Any = None

    @classmethod
    def from_value(cls, value: Any) -> RpcNotification:
        """Validate and parse a decoded JSON value into a notification.

        The checks run in this order: the value is an object, ``jsonrpc`` is
        ``"2.0"``, ``method`` is a string, ``params`` is an array or object
        when present, and no ``id`` member is present.
        """
        if not isinstance(value, dict):
            raise RequestInvalidType(actual_type=str(get_json_type(value)))
        obj = value

        if "jsonrpc" not in obj or not is_valid_version(obj["jsonrpc"]):
            raw_method = obj.get("method")
            method_name = raw_method if isinstance(raw_method, str) else None
            if "jsonrpc" not in obj:
                raise VersionMissing(id=None, method=method_name)
            raise VersionInvalid(id=None, method=method_name, version=obj["jsonrpc"])

        if "method" not in obj:
            raise MethodMissing(id=None)
        method = obj["method"]
        if not isinstance(method, str):
            raise MethodInvalidType(id=None, method=method)

        params = parse_params(obj)

        if "id" in obj:
            raise NotificationHasId(method=method, id=obj["id"])

        return cls(method=method, params=params)

    @classmethod
    def from_request(cls, request: RpcRequest) -> RpcNotification:
        """Drop the id of a request, keeping its method and params."""
        return cls(method=request.method, params=request.params)

    def to_value(self) -> dict[str, Any]:
        """Return the notification as a JSON object, omitting absent params."""
        value: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": self.method}
        if self.params is not None:
            value["params"] = self.params
        return value