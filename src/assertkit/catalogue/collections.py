"""Key, count and shape predicates for containers.

A list is a ``list`` or ``tuple``. A map is a ``Mapping`` whose keys are
all strings. Sequence keys are their non-negative indices.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Sized
from typing import Any

from assertkit.catalogue.base import assertion, fail
from assertkit.catalogue.types import is_int, not_empty
from assertkit.domain.formatting import type_to_string, value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError

LIST_TYPES: tuple[type, ...] = (list, tuple)


def has_key(container: Any, key: Any) -> bool:
    if isinstance(container, Mapping):
        try:
            return key in container
        except TypeError:
            return False
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        return is_int(key) and 0 <= key < len(container)
    return False


@assertion
def key_exists(
    array: Any,
    key: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not has_key(array, key):
        fail(message, "Expected the key {0} to exist.", (value_to_string(key),), error_type)


@assertion
def key_not_exists(
    array: Any,
    key: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if has_key(array, key):
        fail(message, "Expected the key {0} to not exist.", (value_to_string(key),), error_type)


@assertion
def valid_array_key(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not (is_int(value) or isinstance(value, str)):
        fail(message, "Expected string or integer. Got: {0}", (type_to_string(value),), error_type)


@assertion
def count(
    array: Sized,
    number: int,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    size = len(array)
    if size != number:
        fail(
            message,
            "Expected an array to contain {1} elements. Got: {0}.",
            (size, number),
            error_type,
        )


@assertion
def min_count(
    array: Sized,
    min: int,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    size = len(array)
    if size < min:
        fail(
            message,
            "Expected an array to contain at least {1} elements. Got: {0}",
            (size, min),
            error_type,
        )


@assertion
def max_count(
    array: Sized,
    max: int,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    size = len(array)
    if size > max:
        fail(
            message,
            "Expected an array to contain at most {1} elements. Got: {0}",
            (size, max),
            error_type,
        )


@assertion
def count_between(
    array: Sized,
    min: int,  # noqa: A002
    max: int,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    size = len(array)
    if size < min or size > max:
        fail(
            message,
            "Expected an array to contain between {1} and {2} elements. Got: {0}",
            (size, min, max),
            error_type,
        )


@assertion
def is_list(
    array: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not isinstance(array, LIST_TYPES):
        fail(message, "Expected list - non-associative array.", (), error_type)


@assertion
def is_non_empty_list(
    array: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    is_list(array, message, error_type)
    not_empty(array, message, error_type)


@assertion
def is_map(
    array: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not (isinstance(array, Mapping) and all(isinstance(key, str) for key in array)):
        fail(message, "Expected map - associative array with string keys.", (), error_type)


@assertion
def is_non_empty_map(
    array: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    is_map(array, message, error_type)
    not_empty(array, message, error_type)
