"""Equality, ordering and membership predicates.

``eq``/``not_eq`` use ``==``. ``same``/``not_same``/``one_of``/``in_array``
use strict identity (see :func:`assertkit.catalogue.base.is_identical`).
Ordering predicates treat operands that cannot be ordered as a failure.
``range`` is inclusive at both ends.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any

from assertkit.catalogue.base import assertion, compare, elements, fail, is_identical
from assertkit.domain.formatting import value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError


@assertion
def eq(
    value: Any,
    expect: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not compare(operator.eq, expect, value):
        fail(
            message,
            "Expected a value equal to {1}. Got: {0}",
            (value_to_string(value), value_to_string(expect)),
            error_type,
        )


@assertion
def not_eq(
    value: Any,
    expect: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if compare(operator.eq, expect, value):
        fail(message, "Expected a different value than {0}.", (value_to_string(expect),), error_type)


@assertion
def same(
    value: Any,
    expect: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not is_identical(expect, value):
        fail(
            message,
            "Expected a value identical to {1}. Got: {0}",
            (value_to_string(value), value_to_string(expect)),
            error_type,
        )


@assertion
def not_same(
    value: Any,
    expect: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if is_identical(expect, value):
        fail(message, "Expected a value not identical to {0}.", (value_to_string(expect),), error_type)


@assertion
def greater_than(
    value: Any,
    limit: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not compare(operator.gt, value, limit):
        fail(
            message,
            "Expected a value greater than {1}. Got: {0}",
            (value_to_string(value), value_to_string(limit)),
            error_type,
        )


@assertion
def greater_than_eq(
    value: Any,
    limit: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not compare(operator.ge, value, limit):
        fail(
            message,
            "Expected a value greater than or equal to {1}. Got: {0}",
            (value_to_string(value), value_to_string(limit)),
            error_type,
        )


@assertion
def less_than(
    value: Any,
    limit: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not compare(operator.lt, value, limit):
        fail(
            message,
            "Expected a value less than {1}. Got: {0}",
            (value_to_string(value), value_to_string(limit)),
            error_type,
        )


@assertion
def less_than_eq(
    value: Any,
    limit: Any,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not compare(operator.le, value, limit):
        fail(
            message,
            "Expected a value less than or equal to {1}. Got: {0}",
            (value_to_string(value), value_to_string(limit)),
            error_type,
        )


@assertion
def range_(
    value: Any,
    min: Any,  # noqa: A002
    max: Any,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not (compare(operator.ge, value, min) and compare(operator.le, value, max)):
        fail(
            message,
            "Expected a value between {1} and {2}. Got: {0}",
            (value_to_string(value), value_to_string(min), value_to_string(max)),
            error_type,
        )


@assertion
def one_of(
    value: Any,
    values: Iterable[Any],
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Alias of ``in_array``."""
    in_array(value, values, message, error_type)


@assertion
def in_array(
    value: Any,
    values: Iterable[Any],
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    candidates = list(elements(values))
    if not any(is_identical(value, candidate) for candidate in candidates):
        fail(
            message,
            "Expected one of: {1}. Got: {0}",
            (value_to_string(value), ", ".join(value_to_string(c) for c in candidates)),
            error_type,
        )


@assertion
def unique_values(
    values: Iterable[Any],
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Duplicates are counted with ``==``, so unhashable values are fine.

    For a mapping, its values are compared; keys are unique by construction.
    """
    items = list(elements(values))
    distinct: list[Any] = []
    for item in items:
        if not any(compare(operator.eq, item, seen) for seen in distinct):
            distinct.append(item)

    difference = len(items) - len(distinct)
    if difference:
        fail(
            message,
            "Expected an array of unique values, but {0} of them {1} duplicated",
            (difference, "is" if difference == 1 else "are"),
            error_type,
        )
