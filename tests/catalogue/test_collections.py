"""Tests for key, count and shape predicates."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from assertkit.catalogue import collections
from assertkit.errors import InvalidArgumentError


class TestKeys:
    def test_key_exists_in_mapping(self) -> None:
        collections.key_exists({"a": None}, "a")
        with pytest.raises(InvalidArgumentError, match='^Expected the key "b" to exist.$'):
            collections.key_exists({"a": 1}, "b")

    def test_key_exists_in_sequence(self) -> None:
        collections.key_exists(["x", "y"], 1)
        with pytest.raises(InvalidArgumentError, match="^Expected the key 2 to exist.$"):
            collections.key_exists(["x", "y"], 2)

    def test_negative_index_is_not_a_key(self) -> None:
        with pytest.raises(InvalidArgumentError):
            collections.key_exists(["x"], -1)

    def test_unhashable_key(self) -> None:
        with pytest.raises(InvalidArgumentError):
            collections.key_exists({"a": 1}, ["a"])

    def test_key_not_exists(self) -> None:
        collections.key_not_exists({"a": 1}, "b")
        with pytest.raises(InvalidArgumentError, match='^Expected the key "a" to not exist.$'):
            collections.key_not_exists({"a": 1}, "a")

    @pytest.mark.parametrize("value", [0, -5, "key", ""])
    def test_valid_array_key_passes(self, value: object) -> None:
        collections.valid_array_key(value)

    @pytest.mark.parametrize("value,kind", [(1.5, "double"), (None, "NULL"), (True, "boolean")])
    def test_valid_array_key_fails(self, value: object, kind: str) -> None:
        with pytest.raises(InvalidArgumentError, match=f"^Expected string or integer. Got: {kind}$"):
            collections.valid_array_key(value)


class TestCounts:
    def test_count(self) -> None:
        collections.count([1, 2], 2)
        expected = r"^Expected an array to contain 3 elements. Got: 2\.$"
        with pytest.raises(InvalidArgumentError, match=expected):
            collections.count([1, 2], 3)

    def test_min_count(self) -> None:
        collections.min_count({"a": 1}, 1)
        with pytest.raises(InvalidArgumentError, match="at least 2 elements. Got: 1$"):
            collections.min_count({"a": 1}, 2)

    def test_max_count(self) -> None:
        collections.max_count([], 0)
        with pytest.raises(InvalidArgumentError, match="at most 1 elements. Got: 2$"):
            collections.max_count([1, 2], 1)

    def test_count_between(self) -> None:
        collections.count_between([1, 2], 2, 3)
        with pytest.raises(InvalidArgumentError, match="between 2 and 3 elements. Got: 4$"):
            collections.count_between([1, 2, 3, 4], 2, 3)


class TestShapes:
    @pytest.mark.parametrize("value", [[], [1, "a"], ()])
    def test_is_list_passes(self, value: object) -> None:
        collections.is_list(value)

    @pytest.mark.parametrize("value", [{}, {0: "a"}, "abc", {1, 2}])
    def test_is_list_fails(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="^Expected list - non-associative array.$"):
            collections.is_list(value)

    def test_is_non_empty_list(self) -> None:
        collections.is_non_empty_list([0])
        with pytest.raises(InvalidArgumentError, match="Expected a non-empty value"):
            collections.is_non_empty_list([])
        with pytest.raises(InvalidArgumentError, match="Expected list"):
            collections.is_non_empty_list({"a": 1})

    @pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict(b=2)])
    def test_is_map_passes(self, value: object) -> None:
        collections.is_map(value)

    @pytest.mark.parametrize("value", [{0: "a"}, {"a": 1, 2: "b"}, [], "abc"])
    def test_is_map_fails(self, value: object) -> None:
        expected = "^Expected map - associative array with string keys.$"
        with pytest.raises(InvalidArgumentError, match=expected):
            collections.is_map(value)

    def test_is_non_empty_map(self) -> None:
        collections.is_non_empty_map({"a": 1})
        with pytest.raises(InvalidArgumentError, match="Expected a non-empty value"):
            collections.is_non_empty_map({})
        with pytest.raises(InvalidArgumentError, match="Custom"):
            collections.is_non_empty_map([1], "Custom")
