from dataclasses import dataclass
from typing import Optional

import pytest

from rpcroute.errors import ResourceNotFound
from rpcroute.resources import (
    Resources,
    ResourcesBuilder,
    from_resources,
    resources_builder,
)


@dataclass(frozen=True)
class MyType:
    value: int


@dataclass(frozen=True)
class ModelManager:
    name: str = "mm"


@dataclass(frozen=True)
class AiManager:
    name: str = "ai"


def test_extensions_case():
    builder = ResourcesBuilder().append(5).append(MyType(10))
    resources = builder.build()
    assert resources.get(int) == 5
    assert resources.get(MyType) == MyType(10)
    assert resources.get(bool) is None

    copy = builder.build()
    builder.append(7)
    assert copy.get(int) == 5
    assert builder.get(int) == 7


def test_extend_overwrites_shared_types():
    first = ResourcesBuilder().append(8).append(1.5)
    second = ResourcesBuilder().append(4).append("hello")
    first.extend(second)
    assert first.get(int) == 4
    assert first.get(float) == 1.5
    assert first.get(str) == "hello"


def test_append_replaces_same_type():
    builder = ResourcesBuilder().append(MyType(1)).append(MyType(2))
    assert builder.get(MyType) == MyType(2)


def test_bool_and_int_are_distinct_types():
    resources = ResourcesBuilder().append(True).append(3).build()
    assert resources.get(bool) is True
    assert resources.get(int) == 3


def test_is_empty():
    assert ResourcesBuilder().is_empty() is True
    assert Resources().is_empty() is True
    assert Resources.builder().build().is_empty() is True
    assert ResourcesBuilder().append(ModelManager()).build().is_empty() is False


def test_overlay_takes_precedence():
    base = ResourcesBuilder().append(ModelManager("base")).append(AiManager()).build()
    overlay = ResourcesBuilder().append(ModelManager("over")).build()
    combined = base.with_overlay(overlay)
    assert combined.get(ModelManager) == ModelManager("over")
    assert combined.get(AiManager) == AiManager()
    assert base.get(ModelManager) == ModelManager("base")


def test_overlay_on_empty_base():
    overlay = ResourcesBuilder().append(ModelManager()).build()
    combined = Resources().with_overlay(overlay)
    assert combined.get(ModelManager) == ModelManager()
    assert combined.is_empty() is False


def test_resources_builder_function():
    resources = resources_builder(ModelManager(), AiManager()).build()
    assert resources.get(ModelManager) == ModelManager()
    assert resources.get(AiManager) == AiManager()


def test_from_resources_found():
    resources = resources_builder(ModelManager("x")).build()
    assert from_resources(resources, ModelManager) == ModelManager("x")


def test_from_resources_missing_raises():
    with pytest.raises(ResourceNotFound) as info:
        from_resources(Resources(), AiManager)
    assert "AiManager" in info.value.type_name


def test_from_resources_optional():
    empty = Resources()
    assert from_resources(empty, Optional[AiManager]) is None
    full = resources_builder(AiManager("a")).build()
    assert from_resources(full, Optional[AiManager]) == AiManager("a")
    assert from_resources(full, AiManager | None) == AiManager("a")