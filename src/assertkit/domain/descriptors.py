"""Class descriptors and the introspection the reflection predicates need.

A class descriptor is either a ``type`` or a dotted import path such as
``"collections.OrderedDict"``. Bare names resolve against ``builtins``.
Resolution imports modules on demand and never raises: an unknown path
simply resolves to ``None``.
"""

from __future__ import annotations

import abc
import builtins
import importlib
import inspect
from typing import Any, TypeAlias

ClassRef: TypeAlias = type | str


def is_class_ref(ref: Any) -> bool:
    """Whether *ref* has the shape of a class descriptor."""
    return isinstance(ref, (type, str))


def resolve_class(ref: Any) -> type | None:
    """Return the class named by *ref*, or None when it names no class."""
    if isinstance(ref, type):
        return ref
    if not isinstance(ref, str) or not ref.strip():
        return None

    path = ref.strip()
    if "." not in path:
        found = getattr(builtins, path, None)
        return found if isinstance(found, type) else None

    parts = path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except (ImportError, ValueError):
            continue
        for attr in parts[split:]:
            target = getattr(target, attr, None)
            if target is None:
                break
        return target if isinstance(target, type) else None
    return None


def describe_class(ref: Any) -> str:
    """Render a class descriptor for messages (dotted path for types)."""
    if isinstance(ref, type):
        if ref.__module__ == "builtins":
            return ref.__qualname__
        return f"{ref.__module__}.{ref.__qualname__}"
    return str(ref)


def is_interface(cls: type) -> bool:
    """ABCs and ``typing.Protocol`` classes count as interfaces."""
    if getattr(cls, "_is_protocol", False):
        return True
    return isinstance(cls, abc.ABCMeta) and bool(getattr(cls, "__abstractmethods__", None))


def class_of(target: Any) -> type | None:
    """Class behind *target*: a type, a class path string, or an instance."""
    if isinstance(target, (type, str)):
        return resolve_class(target)
    return type(target)


def is_a(value: Any, ref: ClassRef) -> bool:
    """Is-a check; strings and types in *value* are treated as class references."""
    cls = resolve_class(ref)
    if cls is None:
        return False
    if isinstance(value, (str, type)):
        candidate = resolve_class(value)
        return candidate is not None and safe_issubclass(candidate, cls)
    return isinstance(value, cls)


def safe_issubclass(cls: type, parent: type) -> bool:
    # non-runtime-checkable protocols refuse issubclass()
    try:
        return issubclass(cls, parent)
    except TypeError:
        return False


def has_property(target: Any, name: str) -> bool:
    """Whether *target* declares a data attribute (not a method) called *name*."""
    if not isinstance(target, (type, str)) and name in getattr(target, "__dict__", {}):
        return True
    cls = class_of(target)
    if cls is None:
        return False
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass):
            return True
        attr = vars(klass).get(name, _MISSING)
        if attr is _MISSING:
            continue
        return not _is_routine_attr(attr)
    return False


def has_method(target: Any, name: str) -> bool:
    """Whether the class behind *target* defines a callable routine *name*."""
    cls = class_of(target)
    if cls is None:
        return False
    try:
        attr = inspect.getattr_static(cls, name)
    except AttributeError:
        return False
    return _is_routine_attr(attr)


_MISSING = object()


def _is_routine_attr(attr: Any) -> bool:
    if isinstance(attr, (staticmethod, classmethod)):
        return True
    return inspect.isroutine(attr)
