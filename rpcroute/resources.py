"""Type-keyed resources handed to RPC handlers.

A resource is stored under its exact type and looked up by that type. A
``Resources`` value is read-only: a base layer, possibly with an overlay
layer whose entries take precedence.
"""

from __future__ import annotations

import types
import typing
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from .errors import ResourceNotFound

__all__ = ["ResourcesBuilder", "Resources", "resources_builder", "from_resources"]

T = TypeVar("T")

_EMPTY: Mapping[type, Any] = MappingProxyType({})


class ResourcesBuilder:
    """Collects resources, one per type, before they are frozen by ``build``."""

    def __init__(self) -> None:
        self._by_type: dict[type, Any] = {}

    def get(self, kind: type[T]) -> T | None:
        """Return the resource stored for exactly ``kind``, or ``None``."""
        return self._by_type.get(kind)

    def append(self, value: Any) -> ResourcesBuilder:
        """Store ``value`` under its type, replacing any previous one; returns self."""
        self._by_type[type(value)] = value
        return self

    def extend(self, other: ResourcesBuilder) -> ResourcesBuilder:
        """Add every resource of ``other``; its entries win on a shared type."""
        self._by_type.update(other._by_type)
        return self

    def is_empty(self) -> bool:
        return not self._by_type

    def build(self) -> Resources:
        """Freeze the collected resources; later appends do not affect the result."""
        return Resources._from_layers(MappingProxyType(dict(self._by_type)), _EMPTY)

    def __repr__(self) -> str:
        names = ", ".join(kind.__name__ for kind in self._by_type)
        return f"ResourcesBuilder([{names}])"


class Resources:
    """Read-only resources: an overlay layer looked up before a base layer."""

    __slots__ = ("_base", "_overlay")

    def __init__(self) -> None:
        self._base: Mapping[type, Any] = _EMPTY
        self._overlay: Mapping[type, Any] = _EMPTY

    @classmethod
    def _from_layers(cls, base: Mapping[type, Any], overlay: Mapping[type, Any]) -> Resources:
        resources = cls()
        resources._base = base
        resources._overlay = overlay
        return resources

    @classmethod
    def builder(cls) -> ResourcesBuilder:
        """Return a new, empty ``ResourcesBuilder``."""
        return ResourcesBuilder()

    def get(self, kind: type[T]) -> T | None:
        """Return the resource for exactly ``kind``, overlay first, or ``None``."""
        if kind in self._overlay:
            return self._overlay[kind]
        return self._base.get(kind)

    def is_empty(self) -> bool:
        return not self._base and not self._overlay

    def with_overlay(self, overlay: Resources) -> Resources:
        """Return resources with this base and the base layer of ``overlay`` on top."""
        return Resources._from_layers(self._base, overlay._base)

    def __repr__(self) -> str:
        base = ", ".join(kind.__name__ for kind in self._base)
        over = ", ".join(kind.__name__ for kind in self._overlay)
        return f"Resources(base=[{base}], overlay=[{over}])"


def resources_builder(*args: Any) -> ResourcesBuilder:
    """Return a builder holding each of ``args``, appended in order."""
    builder = ResourcesBuilder()
    for value in args:
        builder.append(value)
    return builder


def _optional_inner(kind: Any) -> type | None:
    origin = typing.get_origin(kind)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(kind) if arg is not type(None)]
        if len(args) == 1 and len(typing.get_args(kind)) == 2:
            return args[0]
    return None


def from_resources(resources: Resources, kind: Any) -> Any:
    """Fetch the resource of type ``kind`` for a handler argument.

    ``Optional[X]`` yields ``None`` when ``X`` is absent; any other missing
    type raises ``ResourceNotFound``.
    """
    inner = _optional_inner(kind)
    if inner is not None:
        return resources.get(inner)
    value = resources.get(kind)
    if value is None:
        raise ResourceNotFound(kind)
    return value