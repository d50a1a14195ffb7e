"""Synthetic assertion variants and the immutable assertion registry.

Two combinators derive new predicates from existing ones without touching
their bodies:

- :func:`guard_nullable` -> ``null_or_<name>``: ``None`` passes outright,
  anything else is forwarded unchanged.
- :func:`for_each_element` -> ``all_<name>``: the value must be a non-text
  iterable; each element (each value, for a mapping) is checked in order
  and the first failure propagates as-is.

The checked value may be passed positionally or under the wrapped
predicate's own parameter name (``value=``, ``array=``...).

:class:`AssertionRegistry` generates both variants for every base
predicate when it is built. Variants are not themselves wrapped again, so
names such as ``all_null_or_string`` do not exist.

INVARIANT: A registry never changes after construction.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from assertkit.catalogue import Predicate
from assertkit.catalogue.base import elements
from assertkit.catalogue.types import is_iterable
from assertkit.errors import ErrorTypeRef, InvalidArgumentError, UnknownAssertionError

NULL_OR_PREFIX = "null_or_"
ALL_PREFIX = "all_"
RESERVED_PREFIXES: tuple[str, ...] = (NULL_OR_PREFIX, ALL_PREFIX)

_MISSING = object()


def guard_nullable(predicate: Predicate, name: str | None = None) -> Predicate:
    """Wrap *predicate* so that a ``None`` value passes without checking."""
    signature = _signature_of(predicate)

    @functools.wraps(predicate)
    def null_or(*args: Any, **kwargs: Any) -> None:
        value, _ = _split_call(signature, args, kwargs)
        if value is None:
            return
        predicate(*args, **kwargs)

    _rename(null_or, NULL_OR_PREFIX + (name or predicate.__name__.rstrip("_")))
    return null_or


def for_each_element(predicate: Predicate, name: str | None = None) -> Predicate:
    """Wrap *predicate* so that it runs against every element of an iterable.

    Mappings contribute their values. The iterable check honours the
    caller's ``error_type``. Elements are checked in iteration order and
    the first failure is raised unchanged.
    """
    signature = _signature_of(predicate)

    @functools.wraps(predicate)
    def each(*args: Any, **kwargs: Any) -> None:
        values, call = _split_call(signature, args, kwargs)
        if values is _MISSING:
            # no value at all; let the predicate report the bad call
            predicate(*args, **kwargs)
            return
        is_iterable(values, error_type=_error_type_of(call, kwargs))
        for element in elements(values):
            _invoke(predicate, call, args, kwargs, element)

    _rename(each, ALL_PREFIX + (name or predicate.__name__.rstrip("_")))
    return each


class AssertionRegistry(Mapping[str, Predicate]):
    """Read-only name -> predicate table including generated variants.

    Usage::

        registry = AssertionRegistry(CATALOGUE)
        registry.resolve("all_integer")([1, 2, 3])
    """

    def __init__(self, predicates: Mapping[str, Predicate]) -> None:
        table: dict[str, Predicate] = {}
        for name, predicate in predicates.items():
            _check_base_name(name, predicate)
            table[name] = predicate
        for name, predicate in predicates.items():
            table[NULL_OR_PREFIX + name] = guard_nullable(predicate, name)
            table[ALL_PREFIX + name] = for_each_element(predicate, name)
        self._base_names = tuple(predicates)
        self._table: Mapping[str, Predicate] = MappingProxyType(table)

    def __getitem__(self, name: str) -> Predicate:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def resolve(self, name: str) -> Predicate:
        """Return the predicate for *name* or raise :class:`UnknownAssertionError`."""
        try:
            return self._table[name]
        except (KeyError, TypeError):
            raise UnknownAssertionError(str(name)) from None

    def names(self) -> tuple[str, ...]:
        """Every resolvable name, generated variants included, in sorted order."""
        return tuple(sorted(self._table))

    def base_names(self) -> tuple[str, ...]:
        """Names of the underlying predicates, without generated variants."""
        return self._base_names


def _check_base_name(name: str, predicate: Any) -> None:
    if not isinstance(name, str) or not name.isidentifier():
        msg = f"Assertion name {name!r} must be a valid identifier"
        raise ValueError(msg)
    if name.startswith(RESERVED_PREFIXES):
        msg = f"Assertion name {name!r} uses a reserved prefix"
        raise ValueError(msg)
    if not callable(predicate):
        msg = f"Assertion {name!r} must be callable"
        raise TypeError(msg)


def _rename(wrapper: Predicate, name: str) -> None:
    wrapper.__name__ = name
    wrapper.__qualname__ = name


def _signature_of(predicate: Predicate) -> inspect.Signature | None:
    try:
        return inspect.signature(predicate)
    except (TypeError, ValueError):
        return None


def _split_call(
    signature: inspect.Signature | None,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> tuple[Any, inspect.BoundArguments | None]:
    """Return the checked value and, when the call binds, the bound arguments.

    Calls that do not bind fall back to the first positional argument; the
    predicate itself reports them once it is actually invoked.
    """
    if signature is not None:
        try:
            bound = signature.bind(*args, **kwargs)
        except TypeError:
            bound = None
        if bound is not None and bound.arguments:
            bound.apply_defaults()
            return next(iter(bound.arguments.values())), bound
    return (args[0] if args else _MISSING), None


def _error_type_of(
    bound: inspect.BoundArguments | None,
    kwargs: dict[str, Any],
) -> ErrorTypeRef:
    if bound is not None:
        return bound.arguments.get("error_type", InvalidArgumentError)
    return kwargs.get("error_type", InvalidArgumentError)


def _invoke(
    predicate: Callable[..., None],
    bound: inspect.BoundArguments | None,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    element: Any,
) -> None:
    if bound is None:
        predicate(element, *args[1:], **kwargs)
        return
    subject = next(iter(bound.arguments))
    bound.arguments[subject] = element
    predicate(*bound.args, **bound.kwargs)
