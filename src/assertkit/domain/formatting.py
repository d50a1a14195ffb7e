"""Value rendering for failure messages.

Every function here is total: unusual inputs degrade to a plainer
rendering, they never raise.

Rendering rules for :func:`value_to_string`:
- ``None``/``True``/``False`` -> ``null``/``true``/``false``
- list, tuple, dict, set -> ``array`` (contents are never enumerated)
- str/bytes -> the text in double quotes
- numbers -> ``str(value)``
- file handles, sockets, mmaps -> ``resource``
- date/time objects -> ``<TypeName>: "<ISO-8601>"``
- objects with their own ``__str__`` -> ``<TypeName>: <rendered str()>``
- anything else -> its type name
"""

from __future__ import annotations

import datetime as dt
import io
import mmap
import numbers
import socket
from typing import Any

CONTAINER_TYPES: tuple[type, ...] = (list, tuple, dict, set, frozenset)

RESOURCE_TYPES: dict[type, str] = {
    io.IOBase: "stream",
    socket.socket: "socket",
    mmap.mmap: "mmap",
}

_PRIMITIVE_NAMES: dict[type, str] = {
    type(None): "NULL",
    bool: "boolean",
    int: "integer",
    float: "double",
    str: "string",
    list: "array",
    tuple: "array",
    dict: "array",
}


def resource_type(value: Any) -> str | None:
    """Return the resource kind of *value* (``stream``, ``socket``, ``mmap``) or None."""
    for cls, name in RESOURCE_TYPES.items():
        if isinstance(value, cls):
            return name
    return None


def value_to_string(value: Any) -> str:
    """Render *value* as a short diagnostic string."""
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, CONTAINER_TYPES):
        return "array"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (bytes, bytearray)):
        return f'"{bytes(value).decode("utf-8", errors="backslashreplace")}"'
    if isinstance(value, numbers.Number):
        return _coerce(value)
    if resource_type(value) is not None:
        return "resource"

    type_name = type(value).__name__
    if isinstance(value, (dt.date, dt.time)):
        return f"{type_name}: {value_to_string(value.isoformat())}"
    if _has_own_str(value):
        try:
            text = str(value)
        except Exception:
            return type_name
        return f"{type_name}: {value_to_string(text)}"
    return type_name


def type_to_string(value: Any) -> str:
    """Return the primitive kind name for builtins, the class name otherwise."""
    return _PRIMITIVE_NAMES.get(type(value), type(value).__name__)


def str_length(value: Any) -> int:
    """Count characters in *value*.

    ``bytes`` are decoded as UTF-8 when possible so multi-byte sequences
    count once; undecodable bytes fall back to their raw length. Other
    non-text values are measured through ``str()``.
    """
    if isinstance(value, str):
        return len(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return len(bytes(value).decode("utf-8"))
        except UnicodeDecodeError:
            return len(value)
    return len(_coerce(value))


def render_message(template: str, *args: Any) -> str:
    """Fill ``{0}``, ``{1}``... in *template*; return it verbatim if it cannot be filled."""
    try:
        return template.format(*args)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError):
        return template


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def _coerce(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return type(value).__name__
