"""Type and identity predicates."""

from __future__ import annotations

import decimal
import numbers
import re
import warnings
from collections.abc import Iterable, Sized
from typing import Any

from assertkit.catalogue.base import assertion, fail
from assertkit.domain.formatting import resource_type, type_to_string, value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError

ARRAY_TYPES: tuple[type, ...] = (list, tuple, dict)
SCALAR_TYPES: tuple[type, ...] = (bool, int, float, complex, str, bytes)

# Numeric strings: optional sign, digits with optional fraction, optional exponent.
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    """Real numbers (not booleans) and numeric strings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return True
    if isinstance(value, str):
        return _NUMERIC_STRING.match(value) is not None
    return False


def is_iterable_value(value: Any) -> bool:
    """Iterables other than text; strings are values, not collections."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


@assertion
def string(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not isinstance(value, str):
        fail(message, "Expected a string. Got: {0}", (type_to_string(value),), error_type)


@assertion
def string_not_empty(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    string(value, message, error_type)
    if value == "":
        fail(message, "Expected a different value than {0}.", (value_to_string(""),), error_type)


@assertion
def integer(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not is_int(value):
        fail(message, "Expected an integer. Got: {0}", (type_to_string(value),), error_type)


@assertion
def integerish(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not (is_numeric(value) and _is_whole(value)):
        fail(message, "Expected an integerish value. Got: {0}", (type_to_string(value),), error_type)


@assertion
def positive_integer(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not (is_int(value) and value > 0):
        fail(message, "Expected a positive integer. Got: {0}", (value_to_string(value),), error_type)


@assertion
def float_(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not isinstance(value, float):
        fail(message, "Expected a float. Got: {0}", (type_to_string(value),), error_type)


@assertion
def numeric(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not is_numeric(value):
        fail(message, "Expected a numeric. Got: {0}", (type_to_string(value),), error_type)


@assertion
def natural(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not (is_int(value) and value >= 0):
        fail(
            message,
            "Expected a non-negative integer. Got: {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def boolean(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not isinstance(value, bool):
        fail(message, "Expected a boolean. Got: {0}", (type_to_string(value),), error_type)


@assertion
def scalar(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not isinstance(value, SCALAR_TYPES):
        fail(message, "Expected a scalar. Got: {0}", (type_to_string(value),), error_type)


@assertion
def object_(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    """Anything but ``None``, scalars, and plain arrays."""
    if value is None or isinstance(value, SCALAR_TYPES + ARRAY_TYPES):
        fail(message, "Expected an object. Got: {0}", (type_to_string(value),), error_type)


@assertion
def resource(
    value: Any,
    type: str | None = None,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Open handles: streams, sockets and mmaps, optionally of one kind."""
    kind = resource_type(value)
    if kind is None:
        fail(message, "Expected a resource. Got: {0}", (type_to_string(value),), error_type)
    if type and type != kind:
        fail(
            message,
            "Expected a resource of type {1}. Got: {0}",
            (type_to_string(value), type),
            error_type,
        )


@assertion
def is_callable(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not callable(value):
        fail(message, "Expected a callable. Got: {0}", (type_to_string(value),), error_type)


@assertion
def is_array(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not isinstance(value, ARRAY_TYPES):
        fail(message, "Expected an array. Got: {0}", (type_to_string(value),), error_type)


@assertion
def is_traversable(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    """Deprecated alias of ``is_iterable``."""
    warnings.warn(
        'The "is_traversable" assertion is deprecated. Use "is_iterable" or '
        '"is_instance_of" instead.',
        DeprecationWarning,
        stacklevel=2,
    )
    if not is_iterable_value(value):
        fail(message, "Expected a traversable. Got: {0}", (type_to_string(value),), error_type)


@assertion
def is_array_accessible(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if isinstance(value, (str, bytes)) or not hasattr(type(value), "__getitem__"):
        fail(message, "Expected an array accessible. Got: {0}", (type_to_string(value),), error_type)


@assertion
def is_countable(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sized):
        fail(message, "Expected a countable. Got: {0}", (type_to_string(value),), error_type)


@assertion
def is_iterable(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if not is_iterable_value(value):
        fail(message, "Expected an iterable. Got: {0}", (type_to_string(value),), error_type)


@assertion
def is_empty(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if value:
        fail(message, "Expected an empty value. Got: {0}", (value_to_string(value),), error_type)


@assertion
def not_empty(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if not value:
        fail(message, "Expected a non-empty value. Got: {0}", (value_to_string(value),), error_type)


@assertion
def null(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if value is not None:
        fail(message, "Expected null. Got: {0}", (value_to_string(value),), error_type)


@assertion
def not_null(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if value is None:
        fail(message, "Expected a value other than null.", (), error_type)


@assertion
def true(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if value is not True:
        fail(message, "Expected a value to be true. Got: {0}", (value_to_string(value),), error_type)


@assertion
def false(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if value is not False:
        fail(message, "Expected a value to be false. Got: {0}", (value_to_string(value),), error_type)


@assertion
def not_false(value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError) -> None:
    if value is False:
        fail(message, "Expected a value other than false.", (), error_type)


def _is_whole(value: Any) -> bool:
    number = float(value) if isinstance(value, str) else value
    try:
        return number == int(number)
    except (ValueError, OverflowError):
        return False
