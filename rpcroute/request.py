"""The JSON-RPC request object and its validating parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag
from typing import Any

from .parsing_errors import (
    IdInvalid,
    IdMissing,
    MethodInvalidType,
    MethodMissing,
    RequestInvalidType,
    VersionInvalid,
    VersionMissing,
)
from .rpc_id import RpcId
from .support import get_json_type
from .validation import JSONRPC_VERSION, is_valid_version

__all__ = ["RequestChecks", "RpcRequest"]


class RequestChecks(Flag):
    """Which validations ``RpcRequest.from_value`` performs."""

    NONE = 0
    VERSION = 0b01
    """Check the ``jsonrpc: "2.0"`` member."""
    ID = 0b10
    """Require a valid ``id`` (string, integer or null; floats are refused)."""
    ALL = VERSION | ID


def _id_and_method(obj: dict[str, Any]) -> tuple[Any, str | None]:
    method = obj.get("method")
    return obj.get("id"), method if isinstance(method, str) else None


@dataclass
class RpcRequest:
    """A JSON-RPC request: id, method name and optional params."""

    id: RpcId
    method: str
    params: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, RpcId):
            self.id = RpcId(self.id)

    @classmethod
    def from_value(cls, value: Any, checks: RequestChecks = RequestChecks.ALL) -> RpcRequest:
        """Validate and parse a decoded JSON value into a request.

        Without the ``ID`` check, a missing or invalid id becomes a null id.
        The input is left unchanged.
        """
        if not isinstance(value, dict):
            raise RequestInvalidType(actual_type=str(get_json_type(value)))
        obj = value

        if RequestChecks.VERSION in checks:
            if "jsonrpc" not in obj:
                raw_id, method = _id_and_method(obj)
                raise VersionMissing(id=raw_id, method=method)
            version = obj["jsonrpc"]
            if not is_valid_version(version):
                raw_id, method = _id_and_method(obj)
                raise VersionInvalid(id=raw_id, method=method, version=version)

        has_id = "id" in obj
        raw_id = obj.get("id")

        if "method" not in obj:
            raise MethodMissing(id=raw_id)
        method = obj["method"]
        if not isinstance(method, str):
            raise MethodInvalidType(id=raw_id, method=method)

        check_id = RequestChecks.ID in checks
        if not has_id:
            if check_id:
                raise IdMissing(method=method)
            rpc_id = RpcId()
        else:
            try:
                rpc_id = RpcId.from_value(raw_id)
            except IdInvalid:
                if check_id:
                    raise
                rpc_id = RpcId()

        return cls(id=rpc_id, method=method, params=obj.get("params"))

    def to_value(self) -> dict[str, Any]:
        """Return the request as a JSON object, omitting absent params."""
        value: dict[str, Any] = {
            "jsonrpc": JSONRPC_VERSION,
            "id": self.id.to_value(),
            "method": self.method,
        }
        if self.params is not None:
            value["params"] = self.params
        return value