"""Public entry points: ``Assert.<name>(...)`` and ``assert_that(name, ...)``.

Both resolve names against the default registry, which is built once on
first use from the built-in catalogue plus any entry-point plugins, and
is read-only from then on. Plugin modules may themselves use ``Assert``
at import time; while the default registry is being built, such calls
are served by the built-in catalogue alone.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any

from assertkit.catalogue import CATALOGUE, Predicate
from assertkit.config.settings import AssertKitSettings
from assertkit.dispatch import AssertionRegistry
from assertkit.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_building = threading.local()
_default_registry: AssertionRegistry | None = None


def build_registry(settings: AssertKitSettings | None = None) -> AssertionRegistry:
    """Build a registry from the catalogue and, if enabled, installed plugins."""
    settings = settings or AssertKitSettings.load()
    predicates: dict[str, Predicate] = dict(CATALOGUE)

    if settings.plugins.enabled:
        manager = PluginManager()
        names = manager.discover_and_load(settings.plugins.entry_point_group)
        if names:
            logger.debug("Loaded assertion plugins: %s", ", ".join(names))
        predicates.update(manager.collect_assertions(reserved=CATALOGUE))

    registry = AssertionRegistry(predicates)
    logger.debug("Assertion registry built with %d names", len(registry))
    return registry


def default_registry() -> AssertionRegistry:
    """Return the process-wide registry, building it on first call.

    Construction runs outside the lock. Threads racing on the first call
    may each build one, but only the first to finish is published.
    """
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    if getattr(_building, "active", False):
        return builtin_registry()

    _building.active = True
    try:
        registry = build_registry()
    finally:
        _building.active = False

    with _lock:
        if _default_registry is None:
            _default_registry = registry
        return _default_registry


@functools.lru_cache(maxsize=1)
def builtin_registry() -> AssertionRegistry:
    """Registry over the built-in catalogue only, without plugins."""
    return AssertionRegistry(CATALOGUE)


class Assertions:
    """Attribute-style access to an :class:`AssertionRegistry`.

    Usage::

        Assert.string(name)
        Assert.null_or_positive_integer(limit)
        Assert.all_is_instance_of(handlers, "logging.Handler")
        Assert("range", port, 1, 65535, "Port out of range: {0}")
    """

    def __init__(self, registry: AssertionRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> AssertionRegistry:
        return self._registry if self._registry is not None else default_registry()

    def __getattr__(self, name: str) -> Predicate:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.registry.resolve(name)

    def __call__(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.registry.resolve(name)(*args, **kwargs)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.registry))


Assert = Assertions()


def assert_that(name: str, *args: Any, **kwargs: Any) -> None:
    """Run the assertion called *name* against ``args``.

    ``assert_that("null_or_string", value)`` is the same as
    ``Assert.null_or_string(value)``.

    Raises:
        UnknownAssertionError: If *name* is not a registered assertion.
    """
    Assert(name, *args, **kwargs)
