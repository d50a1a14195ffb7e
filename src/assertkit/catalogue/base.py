"""Predicate registration and the shared invocation protocol.

Every predicate is a plain function::

    name(value, *operands, message="", error_type=InvalidArgumentError) -> None

It returns nothing on success and calls :func:`fail` otherwise. ``fail``
fills the caller's message (or the predicate's stock template) with the
rendered value and operands, then hands it to
:func:`assertkit.errors.report_failure`.

INVARIANT: ``CATALOGUE`` is populated at import time and never mutated
after :mod:`assertkit.catalogue` finishes loading.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NoReturn, TypeAlias, TypeVar

from assertkit.domain.formatting import render_message
from assertkit.errors import ErrorTypeRef, report_failure

Predicate: TypeAlias = Callable[..., None]

F = TypeVar("F", bound=Predicate)

CATALOGUE: dict[str, Predicate] = {}


def assertion(func: F) -> F:
    """Register *func* under its name, minus any trailing underscore.

    ``def float_(...)`` registers as ``"float"``.
    """
    name = func.__name__.rstrip("_")
    if name in CATALOGUE:
        msg = f"Assertion {name!r} is already registered"
        raise ValueError(msg)
    CATALOGUE[name] = func
    return func


def fail(
    message: str,
    default: str,
    args: tuple[Any, ...],
    error_type: ErrorTypeRef,
) -> NoReturn:
    """Report a failure using *message*, or *default* when *message* is empty."""
    report_failure(render_message(message or default, *args), error_type)


def elements(values: Iterable[Any]) -> Iterable[Any]:
    """Members of a collection. A mapping contributes its values, not its keys."""
    if isinstance(values, Mapping):
        return values.values()
    return values


def compare(op: Callable[[Any, Any], Any], left: Any, right: Any) -> bool:
    """Apply an ordering operator; operands that cannot be ordered compare false."""
    try:
        return bool(op(left, right))
    except TypeError:
        return False


def is_identical(left: Any, right: Any) -> bool:
    """Strict identity: the same object, or equal values of the same builtin type."""
    if left is right:
        return True
    if type(left) is not type(right) or type(left) not in _VALUE_TYPES:
        return False
    return compare(operator.eq, left, right)


_VALUE_TYPES: frozenset[type] = frozenset(
    {bool, int, float, complex, str, bytes, tuple, list, dict, set, frozenset}
)
