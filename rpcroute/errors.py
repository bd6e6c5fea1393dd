"""Errors raised by routing calls, and the holder for application errors."""

from __future__ import annotations

from typing import Any, TypeVar

__all__ = [
    "RouterError",
    "ParamsParsingError",
    "ParamsMissingButRequested",
    "MethodUnknown",
    "ResourceNotFound",
    "HandlerResultSerializeError",
    "HandlerError",
    "into_handler_error",
]

T = TypeVar("T")

_EMPTY = object()


def _type_name(kind: type) -> str:
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


class RouterError(Exception):
    """Base class for every error a router call can report."""

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return str(self)


class ParamsParsingError(RouterError):
    """The params could not be turned into the handler's params type."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ParamsParsing({self.message})"


class ParamsMissingButRequested(RouterError):
    """The handler requires params but the call had none."""


class MethodUnknown(RouterError):
    """No route is registered under the requested method name."""


class ResourceNotFound(RouterError):
    """A handler asked for a resource type that is not available."""

    def __init__(self, kind: type | str) -> None:
        name = kind if isinstance(kind, str) else _type_name(kind)
        super().__init__(name)
        self.type_name = name

    def __str__(self) -> str:
        return f'ResourceNotFound("{self.type_name}")'


class HandlerResultSerializeError(RouterError):
    """The value returned by a handler could not be made into JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"HandlerResultSerialize({self.message})"


class HandlerError(RouterError):
    """Holds the application error a handler failed with.

    The held value can be retrieved by its exact type with ``get`` or taken
    out with ``remove``.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self._value: Any = value
        self._type_name = _type_name(type(value))

    def get(self, kind: type[T]) -> T | None:
        """Return the held value if its type is exactly ``kind``, else ``None``."""
        value = self._value
        if value is not _EMPTY and type(value) is kind:
            return value
        return None

    def remove(self, kind: type[T]) -> T | None:
        """Like ``get``, but the value is taken out of this error."""
        value = self.get(kind)
        if value is not None or (self._value is None and kind is type(None)):
            self._value = _EMPTY
        return value

    def type_name(self) -> str:
        """Return the name of the type of the value this error was made with."""
        return self._type_name

    def to_value(self) -> str:
        """Return the JSON form: a message naming the held type."""
        return f"RpcHandlerError containing error '{self._type_name}'"

    def __str__(self) -> str:
        return f"HandlerError {{ type_name: {self._type_name!r} }}"


def into_handler_error(value: Any) -> HandlerError:
    """Wrap an application error in a ``HandlerError``; one is returned as is."""
    if isinstance(value, HandlerError):
        return value
    return HandlerError(value)