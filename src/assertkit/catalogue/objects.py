"""Reflection predicates over class descriptors, plus ``throws``.

Class arguments accept a ``type`` or a dotted path string (see
:mod:`assertkit.domain.descriptors`). A path that names no class never
matches; it is not an error in itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from assertkit.catalogue.base import assertion, elements, fail
from assertkit.domain.descriptors import (
    ClassRef,
    class_of,
    describe_class,
    has_method,
    has_property,
    is_a,
    is_class_ref,
    is_interface,
    resolve_class,
    safe_issubclass,
)
from assertkit.domain.formatting import type_to_string, value_to_string
from assertkit.errors import ErrorTypeRef, InvalidArgumentError


def _require_class_ref(ref: Any, error_type: ErrorTypeRef) -> None:
    if not is_class_ref(ref):
        fail("", "Expected a class or class name. Got: {0}", (type_to_string(ref),), error_type)


def _instance_of(value: Any, ref: ClassRef) -> bool:
    cls = resolve_class(ref)
    return cls is not None and isinstance(value, cls)


@assertion
def is_instance_of(
    value: Any,
    class_: ClassRef,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not _instance_of(value, class_):
        fail(
            message,
            "Expected an instance of {1}. Got: {0}",
            (type_to_string(value), describe_class(class_)),
            error_type,
        )


@assertion
def not_instance_of(
    value: Any,
    class_: ClassRef,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if _instance_of(value, class_):
        fail(
            message,
            "Expected an instance other than {1}. Got: {0}",
            (type_to_string(value), describe_class(class_)),
            error_type,
        )


@assertion
def is_instance_of_any(
    value: Any,
    classes: Iterable[ClassRef],
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    candidates = list(elements(classes))
    if any(_instance_of(value, ref) for ref in candidates):
        return
    fail(
        message,
        "Expected an instance of any of {1}. Got: {0}",
        (type_to_string(value), ", ".join(describe_class(ref) for ref in candidates)),
        error_type,
    )


@assertion
def is_a_of(
    value: Any,
    class_: ClassRef,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Instances, classes and class paths in *value* all qualify."""
    _require_class_ref(class_, error_type)
    if not is_a(value, class_):
        fail(
            message,
            'Expected an instance of this class or to this class among its parents "{1}". Got: {0}',
            (value_to_string(value), describe_class(class_)),
            error_type,
        )


@assertion
def is_not_a(
    value: Any,
    class_: ClassRef,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    _require_class_ref(class_, error_type)
    if is_a(value, class_):
        fail(
            message,
            "Expected an instance of this class or to this class among its parents "
            'other than "{1}". Got: {0}',
            (value_to_string(value), describe_class(class_)),
            error_type,
        )


@assertion
def is_any_of(
    value: Any,
    classes: Iterable[ClassRef],
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    candidates = list(elements(classes))
    for ref in candidates:
        _require_class_ref(ref, error_type)
        if is_a(value, ref):
            return
    fail(
        message,
        "Expected an instance of any of this classes or any of those classes "
        'among their parents "{1}". Got: {0}',
        (value_to_string(value), ", ".join(describe_class(ref) for ref in candidates)),
        error_type,
    )


@assertion
def class_exists(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    if resolve_class(value) is None:
        fail(message, "Expected an existing class name. Got: {0}", (value_to_string(value),), error_type)


@assertion
def subclass_of(
    value: Any,
    class_: ClassRef,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Strict: a class is not a sub-class of itself."""
    cls = class_of(value)
    parent = resolve_class(class_)
    if cls is None or parent is None or cls is parent or not safe_issubclass(cls, parent):
        fail(
            message,
            "Expected a sub-class of {1}. Got: {0}",
            (value_to_string(value), describe_class(class_)),
            error_type,
        )


@assertion
def interface_exists(
    value: Any, message: str = "", error_type: ErrorTypeRef = InvalidArgumentError
) -> None:
    cls = resolve_class(value)
    if cls is None or not is_interface(cls):
        fail(
            message,
            "Expected an existing interface name. got {0}",
            (value_to_string(value),),
            error_type,
        )


@assertion
def implements_interface(
    value: Any,
    interface: ClassRef,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    cls = class_of(value)
    iface = resolve_class(interface)
    if (
        cls is None
        or iface is None
        or cls is iface
        or not is_interface(iface)
        or not safe_issubclass(cls, iface)
    ):
        fail(
            message,
            "Expected an implementation of {1}. Got: {0}",
            (value_to_string(value), describe_class(interface)),
            error_type,
        )


@assertion
def property_exists(
    class_or_object: Any,
    property: str,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not has_property(class_or_object, property):
        fail(message, "Expected the property {0} to exist.", (value_to_string(property),), error_type)


@assertion
def property_not_exists(
    class_or_object: Any,
    property: str,  # noqa: A002
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if has_property(class_or_object, property):
        fail(
            message,
            "Expected the property {0} to not exist.",
            (value_to_string(property),),
            error_type,
        )


@assertion
def method_exists(
    class_or_object: Any,
    method: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if not has_method(class_or_object, method):
        fail(message, "Expected the method {0} to exist.", (value_to_string(method),), error_type)


@assertion
def method_not_exists(
    class_or_object: Any,
    method: str,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    if has_method(class_or_object, method):
        fail(message, "Expected the method {0} to not exist.", (value_to_string(method),), error_type)


@assertion
def throws(
    expression: Callable[[], Any],
    class_: ClassRef = Exception,
    message: str = "",
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> None:
    """Call *expression* and require it to raise *class_* (or a subclass).

    Exceptions outside the ``Exception`` hierarchy (``KeyboardInterrupt``,
    ``SystemExit``) propagate unless they are the expected type.
    """
    _require_class_ref(class_, error_type)
    expected = resolve_class(class_)
    actual = "none"

    try:
        expression()
    except BaseException as exc:
        if expected is not None and isinstance(exc, expected):
            return
        if not isinstance(exc, Exception):
            raise
        actual = type(exc).__name__

    fail(
        message,
        'Expected to throw "{0}", got "{1}"',
        (describe_class(class_), actual),
        error_type,
    )
