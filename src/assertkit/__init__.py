"""assertkit: precondition assertions with uniform, caller-typed errors.

Usage::

    from assertkit import Assert, assert_that

    Assert.string(name)
    Assert.null_or_range(port, 1, 65535)
    Assert.all_is_instance_of(handlers, "logging.Handler", error_type=TypeError)
    assert_that("uuid", request_id, "Bad request id: {0}")
"""

from assertkit.config.logging import configure_logging
from assertkit.dispatch import AssertionRegistry, for_each_element, guard_nullable
from assertkit.errors import (
    AssertKitError,
    ConfigError,
    ErrorTypeDefect,
    InvalidArgumentError,
    UnknownAssertionError,
    report_failure,
)
from assertkit.facade import Assert, Assertions, assert_that, build_registry, default_registry

__all__ = [
    "Assert",
    "AssertKitError",
    "AssertionRegistry",
    "Assertions",
    "ConfigError",
    "ErrorTypeDefect",
    "InvalidArgumentError",
    "UnknownAssertionError",
    "assert_that",
    "build_registry",
    "configure_logging",
    "default_registry",
    "for_each_element",
    "guard_nullable",
    "report_failure",
]
