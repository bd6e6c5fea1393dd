"""The JSON-RPC 2.0 response object, success or error, and its parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .call import CallError, CallSuccess
from .parsing_errors import IdInvalid
from .rpc_error import RpcError
from .rpc_id import RpcId
from .validation import JSONRPC_VERSION

__all__ = [
    "RpcResponseParsingError",
    "InvalidJsonRpcVersion",
    "MissingJsonRpcVersion",
    "MissingId",
    "InvalidId",
    "MissingResultAndError",
    "BothResultAndError",
    "InvalidErrorObject",
    "RpcResponse",
    "RpcSuccessResponse",
    "RpcErrorResponse",
]


# -- Parsing errors


class RpcResponseParsingError(ValueError):
    """Base class for every response parsing failure."""

    _fields: tuple[str, ...] = ()

    def __str__(self) -> str:
        name = type(self).__name__
        if not self._fields:
            return name if not self.args else f"{name}({self.args[0]})"
        parts = ", ".join(f"{field}: {getattr(self, field)!r}" for field in self._fields)
        return f"{name} {{ {parts} }}"

    __repr__ = __str__


class InvalidJsonRpcVersion(RpcResponseParsingError):
    """The ``jsonrpc`` member is not ``"2.0"``."""

    _fields = ("id", "expected", "actual")

    def __init__(self, id: RpcId | None, actual: Any, expected: str = JSONRPC_VERSION) -> None:
        self.id = id
        self.expected = expected
        self.actual = actual
        super().__init__(id, expected, actual)


class MissingJsonRpcVersion(RpcResponseParsingError):
    """The ``jsonrpc`` member is absent."""

    _fields = ("id",)

    def __init__(self, id: RpcId | None = None) -> None:
        self.id = id
        super().__init__(id)


class MissingId(RpcResponseParsingError):
    """The ``id`` member is absent."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "MissingId"


class InvalidId(RpcResponseParsingError):
    """The ``id`` member is not a valid id."""

    def __init__(self, cause: IdInvalid) -> None:
        self.cause = cause
        super().__init__(cause)

    def __str__(self) -> str:
        return f"InvalidId({self.cause})"


class MissingResultAndError(RpcResponseParsingError):
    """Neither ``result`` nor ``error`` is present."""

    _fields = ("id",)

    def __init__(self, id: RpcId) -> None:
        self.id = id
        super().__init__(id)


class BothResultAndError(RpcResponseParsingError):
    """Both ``result`` and ``error`` are present."""

    _fields = ("id",)

    def __init__(self, id: RpcId) -> None:
        self.id = id
        super().__init__(id)


class InvalidErrorObject(RpcResponseParsingError):
    """The ``error`` member is not a valid error object."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# -- Responses


class RpcResponse:
    """A JSON-RPC response: either an ``RpcSuccessResponse`` or an ``RpcErrorResponse``."""

    id: RpcId

    @classmethod
    def from_success(cls, id: RpcId, result: Any) -> RpcSuccessResponse:
        return RpcSuccessResponse(id=id, result=result)

    @classmethod
    def from_error(cls, id: RpcId, error: RpcError) -> RpcErrorResponse:
        return RpcErrorResponse(id=id, error=error)

    @classmethod
    def from_call(cls, outcome: CallSuccess | CallError) -> RpcResponse:
        """Build the response for the outcome of a router call."""
        if isinstance(outcome, CallSuccess):
            return cls.from_success(outcome.id, outcome.value)
        if isinstance(outcome, CallError):
            return cls.from_error(outcome.id, RpcError.from_call_error(outcome))
        raise TypeError(f"expected CallSuccess or CallError, not {type(outcome).__name__}")

    @classmethod
    def from_value(cls, value: Any) -> RpcResponse:
        """Validate and parse a decoded JSON value into a response.

        Checks run in order: version, id, then exactly one of ``result`` and
        ``error``. Unknown members are ignored.
        """
        if not isinstance(value, dict):
            raise RpcResponseParsingError("expected a JSON-RPC 2.0 response object")

        id_for_error: RpcId | None = None
        if "id" in value:
            try:
                id_for_error = RpcId.from_value(value["id"])
            except IdInvalid:
                id_for_error = None

        if "jsonrpc" not in value:
            raise MissingJsonRpcVersion(id=id_for_error)
        version = value["jsonrpc"]
        if version != JSONRPC_VERSION or not isinstance(version, str):
            raise InvalidJsonRpcVersion(id=id_for_error, actual=version)

        if "id" not in value:
            raise MissingId()
        try:
            rpc_id = RpcId.from_value(value["id"])
        except IdInvalid as exc:
            raise InvalidId(exc) from exc

        has_result = "result" in value
        has_error = "error" in value
        if has_result and has_error:
            raise BothResultAndError(id=rpc_id)
        if has_result:
            return RpcSuccessResponse(id=rpc_id, result=value["result"])
        if has_error:
            try:
                error = RpcError.from_value(value["error"])
            except ValueError as exc:
                raise InvalidErrorObject(str(exc)) from exc
            return RpcErrorResponse(id=rpc_id, error=error)
        raise MissingResultAndError(id=rpc_id)

    def is_success(self) -> bool:
        return isinstance(self, RpcSuccessResponse)

    def is_error(self) -> bool:
        return isinstance(self, RpcErrorResponse)

    def parts(self) -> tuple[RpcId, Any, RpcError | None]:
        """Return ``(id, result, error)``; ``error`` is ``None`` on success, ``result`` on error."""
        raise NotImplementedError

    def to_value(self) -> dict[str, Any]:
        """Return the response as a JSON object."""
        raise NotImplementedError


@dataclass
class RpcSuccessResponse(RpcResponse):
    """A successful response: the request id and the result."""

    id: RpcId
    result: Any

    def parts(self) -> tuple[RpcId, Any, RpcError | None]:
        return self.id, self.result, None

    def to_value(self) -> dict[str, Any]:
        return {"jsonrpc": JSONRPC_VERSION, "id": self.id.to_value(), "result": self.result}


@dataclass
class RpcErrorResponse(RpcResponse):
    """An error response: the request id (possibly null) and the error object."""

    id: RpcId
    error: RpcError

    def parts(self) -> tuple[RpcId, Any, RpcError | None]:
        return self.id, None, self.error

    def to_value(self) -> dict[str, Any]:
        return {"jsonrpc": JSONRPC_VERSION, "id": self.id.to_value(), "error": self.error.to_value()}