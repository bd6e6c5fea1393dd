"""The JSON-RPC 2.0 error object and its mapping from router errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .call import CallError
from .errors import (
    HandlerResultSerializeError,
    MethodUnknown,
    ParamsMissingButRequested,
    ParamsParsingError,
    RouterError,
)
from .support import get_json_type

__all__ = ["RpcError"]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass
class RpcError:
    """A JSON-RPC error object: a code, a short message and optional data."""

    code: int
    message: str
    data: Any = None

    CODE_PARSE_ERROR: ClassVar[int] = -32700
    CODE_INVALID_REQUEST: ClassVar[int] = -32600
    CODE_METHOD_NOT_FOUND: ClassVar[int] = -32601
    CODE_INVALID_PARAMS: ClassVar[int] = -32602
    CODE_INTERNAL_ERROR: ClassVar[int] = -32603
    # -32000 to -32099 are reserved for implementation-defined server errors.

    # -- Predefined errors

    @classmethod
    def from_parse_error(cls, data: Any = None) -> RpcError:
        return cls(cls.CODE_PARSE_ERROR, "Parse error", data)

    @classmethod
    def from_invalid_request(cls, data: Any = None) -> RpcError:
        return cls(cls.CODE_INVALID_REQUEST, "Invalid Request", data)

    @classmethod
    def from_method_not_found(cls, data: Any = None) -> RpcError:
        return cls(cls.CODE_METHOD_NOT_FOUND, "Method not found", data)

    @classmethod
    def from_invalid_params(cls, data: Any = None) -> RpcError:
        return cls(cls.CODE_INVALID_PARAMS, "Invalid params", data)

    @classmethod
    def from_internal_error(cls, data: Any = None) -> RpcError:
        return cls(cls.CODE_INTERNAL_ERROR, "Internal error", data)

    # -- From router errors

    @classmethod
    def from_router_error(cls, error: RouterError) -> RpcError:
        """Map a router error to an error object whose data is the error's text.

        Errors raised by a handler itself map to a generic internal error.
        """
        if isinstance(error, ParamsParsingError):
            return cls.from_invalid_params(error.message)
        if isinstance(error, ParamsMissingButRequested):
            return cls.from_invalid_params(str(error))
        if isinstance(error, MethodUnknown):
            return cls.from_method_not_found(str(error))
        if isinstance(error, HandlerResultSerializeError):
            return cls.from_internal_error(error.message)
        return cls.from_internal_error(str(error))

    @classmethod
    def from_call_error(cls, call_error: CallError) -> RpcError:
        """Map the router error carried by a failed call."""
        return cls.from_router_error(call_error.error)

    # -- JSON conversions

    @classmethod
    def from_value(cls, value: Any) -> RpcError:
        """Parse a decoded JSON error object, raising ``ValueError`` if it is not one."""
        if not isinstance(value, dict):
            try:
                actual = str(get_json_type(value)).lower()
            except TypeError:
                actual = type(value).__name__
            raise ValueError(f"invalid type: {actual}, expected struct RpcError")
        if "code" not in value:
            raise ValueError("missing field `code`")
        if "message" not in value:
            raise ValueError("missing field `message`")
        code = value["code"]
        if isinstance(code, bool) or not isinstance(code, int) or not _I64_MIN <= code <= _I64_MAX:
            raise ValueError(f"invalid value for `code`: {code!r}, expected i64")
        message = value["message"]
        if not isinstance(message, str):
            raise ValueError(f"invalid value for `message`: {message!r}, expected a string")
        return cls(code=code, message=message, data=value.get("data"))

    def to_value(self) -> dict[str, Any]:
        """Return the error as a JSON object, omitting absent data."""
        value: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            value["data"] = self.data
        return value