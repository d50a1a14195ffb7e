"""Tests for class-descriptor resolution and introspection."""

from __future__ import annotations

import abc
import collections
import collections.abc
from typing import Protocol

import pytest

from assertkit.domain.descriptors import (
    class_of,
    describe_class,
    has_method,
    has_property,
    is_a,
    is_interface,
    resolve_class,
)


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self) -> float: ...


class Square(Shape):
    sides = 4
    label: str

    def __init__(self) -> None:
        self.width = 2.0

    def area(self) -> float:
        return self.width**2

    @staticmethod
    def unit() -> Square:
        return Square()

    @classmethod
    def build(cls) -> Square:
        return cls()

    @property
    def perimeter(self) -> float:
        return self.width * 4


class Closeable(Protocol):
    def close(self) -> None: ...


class TestResolveClass:
    def test_type_passes_through(self) -> None:
        assert resolve_class(Square) is Square

    def test_dotted_path(self) -> None:
        assert resolve_class("collections.OrderedDict") is collections.OrderedDict

    def test_submodule_path(self) -> None:
        assert resolve_class("collections.abc.Mapping") is collections.abc.Mapping

    def test_builtin_bare_name(self) -> None:
        assert resolve_class("ValueError") is ValueError

    @pytest.mark.parametrize(
        "ref",
        ["", "   ", "NoSuchBuiltin", "no.such.module.Thing", "collections.NoSuchThing", "len", 42, None],
    )
    def test_unresolvable_is_none(self, ref: object) -> None:
        assert resolve_class(ref) is None

    def test_non_class_attribute_is_none(self) -> None:
        assert resolve_class("os.path.join") is None


class TestDescribeClass:
    def test_builtin(self) -> None:
        assert describe_class(ValueError) == "ValueError"

    def test_module_class(self) -> None:
        assert describe_class(collections.OrderedDict) == "collections.OrderedDict"

    def test_string_passes_through(self) -> None:
        assert describe_class("Foo") == "Foo"


class TestInterfaces:
    def test_abstract_base_class(self) -> None:
        assert is_interface(Shape) is True

    def test_concrete_subclass(self) -> None:
        assert is_interface(Square) is False

    def test_protocol(self) -> None:
        assert is_interface(Closeable) is True

    def test_plain_class(self) -> None:
        assert is_interface(dict) is False


class TestIsA:
    def test_instance(self) -> None:
        assert is_a(Square(), Shape)

    def test_class_value(self) -> None:
        assert is_a(Square, Shape)

    def test_class_path_value(self) -> None:
        assert is_a("collections.OrderedDict", dict)

    def test_unrelated(self) -> None:
        assert not is_a(Square(), dict)

    def test_unknown_ref(self) -> None:
        assert not is_a(Square(), "no.such.Class")

    def test_class_of(self) -> None:
        assert class_of(Square()) is Square
        assert class_of("collections.OrderedDict") is collections.OrderedDict


class TestMembers:
    @pytest.mark.parametrize("name", ["sides", "label", "perimeter"])
    def test_class_properties(self, name: str) -> None:
        assert has_property(Square, name)

    def test_instance_attribute(self) -> None:
        assert has_property(Square(), "width")
        assert not has_property(Square, "width")

    def test_method_is_not_property(self) -> None:
        assert not has_property(Square, "area")

    @pytest.mark.parametrize("name", ["area", "unit", "build", "__init__"])
    def test_methods(self, name: str) -> None:
        assert has_method(Square, name)
        assert has_method(Square(), name)

    def test_attribute_is_not_method(self) -> None:
        assert not has_method(Square, "sides")
        assert not has_method(Square, "perimeter")

    def test_missing(self) -> None:
        assert not has_method(Square, "missing")
        assert not has_property(Square, "missing")

    def test_unresolvable_target(self) -> None:
        assert not has_method("no.such.Class", "area")
