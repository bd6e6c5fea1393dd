"""Errors raised when a JSON-RPC request or notification fails validation.

By design the ``params`` of a message are never captured, as they can be
arbitrarily large.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "RpcRequestParsingError",
    "RequestInvalidType",
    "ParamsInvalidType",
    "VersionMissing",
    "VersionInvalid",
    "MethodMissing",
    "MethodInvalidType",
    "NotificationHasId",
    "MethodInvalid",
    "IdMissing",
    "IdInvalid",
    "ParseFailure",
]


class RpcRequestParsingError(ValueError):
    """Base class for every request parsing failure."""

    _fields: tuple[str, ...] = ()

    def __str__(self) -> str:
        name = type(self).__name__
        if not self._fields:
            return name
        parts = ", ".join(f"{field}: {getattr(self, field)!r}" for field in self._fields)
        return f"{name} {{ {parts} }}"

    __repr__ = __str__


class RequestInvalidType(RpcRequestParsingError):
    """The message is not a JSON object."""

    _fields = ("actual_type",)

    def __init__(self, actual_type: str) -> None:
        self.actual_type = actual_type
        super().__init__(actual_type)


class ParamsInvalidType(RpcRequestParsingError):
    """The ``params`` member is neither an array nor an object."""

    _fields = ("actual_type",)

    def __init__(self, actual_type: str) -> None:
        self.actual_type = actual_type
        super().__init__(actual_type)


class VersionMissing(RpcRequestParsingError):
    """The ``jsonrpc`` member is absent."""

    _fields = ("id", "method")

    def __init__(self, id: Any = None, method: str | None = None) -> None:
        self.id = id
        self.method = method
        super().__init__(id, method)


class VersionInvalid(RpcRequestParsingError):
    """The ``jsonrpc`` member is not ``"2.0"``."""

    _fields = ("id", "method", "version")

    def __init__(self, id: Any, method: str | None, version: Any) -> None:
        self.id = id
        self.method = method
        self.version = version
        super().__init__(id, method, version)


class MethodMissing(RpcRequestParsingError):
    """The ``method`` member is absent."""

    _fields = ("id",)

    def __init__(self, id: Any = None) -> None:
        self.id = id
        super().__init__(id)


class MethodInvalidType(RpcRequestParsingError):
    """The ``method`` member is not a string."""

    _fields = ("id", "method")

    def __init__(self, id: Any, method: Any) -> None:
        self.id = id
        self.method = method
        super().__init__(id, method)


class NotificationHasId(RpcRequestParsingError):
    """A notification carries an ``id`` member."""

    _fields = ("method", "id")

    def __init__(self, method: str | None, id: Any) -> None:
        self.method = method
        self.id = id
        super().__init__(method, id)


class MethodInvalid(RpcRequestParsingError):
    """The method name is not acceptable."""

    _fields = ("actual",)

    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(actual)


class IdMissing(RpcRequestParsingError):
    """The ``id`` member is absent from a request."""

    _fields = ("method",)

    def __init__(self, method: str | None = None) -> None:
        self.method = method
        super().__init__(method)


class IdInvalid(RpcRequestParsingError):
    """The ``id`` member is not a string, an integer or null."""

    _fields = ("actual", "cause")

    def __init__(self, actual: str, cause: str) -> None:
        self.actual = actual
        self.cause = cause
        super().__init__(actual, cause)


class ParseFailure(RpcRequestParsingError):
    """The text could not be decoded as JSON at all."""

    _fields = ("message",)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)