"""Error taxonomy and the single failure choke point.

Three distinct signals:
- InvalidArgumentError: a predicate's condition is false (default type).
- ErrorTypeDefect: the caller-supplied ``error_type`` cannot carry a message.
- UnknownAssertionError: a name resolves to no registered assertion.

INVARIANT: Every predicate failure passes through :func:`report_failure`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NoReturn, TypeAlias

logger = logging.getLogger(__name__)


class AssertKitError(Exception):
    """Base class for every exception raised by assertkit itself."""


class InvalidArgumentError(AssertKitError, ValueError):
    """Default error raised when an assertion does not hold."""


class ErrorTypeDefect(AssertKitError, TypeError):
    """The requested ``error_type`` is not a usable exception type."""


class UnknownAssertionError(AssertKitError, AttributeError):
    """An assertion name matched nothing in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such method: {name}")
        self.name = name


class ConfigError(AssertKitError):
    """Configuration could not be loaded."""


ErrorTypeRef: TypeAlias = type[Exception] | Callable[[str], Exception]


def build_error(message: str, error_type: ErrorTypeRef) -> Exception:
    """Construct ``error_type(message)`` after checking it is a real error type.

    Accepts an exception class or a factory returning an exception. Anything
    else raises :class:`ErrorTypeDefect` instead of the requested type.
    """
    if isinstance(error_type, type):
        if not issubclass(error_type, Exception):
            msg = f"Expected an instance of Exception. Got: {error_type.__qualname__}"
            raise ErrorTypeDefect(msg)
    elif not callable(error_type):
        msg = f"Expected an exception type or factory. Got: {type(error_type).__name__}"
        raise ErrorTypeDefect(msg)

    try:
        error = error_type(message)
    except TypeError as exc:
        msg = f"Error type {_describe(error_type)} cannot be built from a message"
        raise ErrorTypeDefect(msg) from exc

    if not isinstance(error, Exception):
        msg = f"Expected an instance of Exception. Got: {type(error).__name__}"
        raise ErrorTypeDefect(msg)
    return error


def report_failure(
    message: str,
    error_type: ErrorTypeRef = InvalidArgumentError,
) -> NoReturn:
    """Raise *error_type* carrying *message*. Never returns."""
    error = build_error(message, error_type)
    logger.debug("assertion failed: %s", message, extra={"error_type": type(error).__name__})
    raise error


def _describe(error_type: object) -> str:
    return getattr(error_type, "__qualname__", None) or type(error_type).__name__
