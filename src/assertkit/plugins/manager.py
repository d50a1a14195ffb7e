"""Plugin discovery and predicate collection.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
for the ``assertkit.plugins`` group, plus direct registration.
Capabilities: contributing predicates to the default registry.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping

import pluggy

from assertkit.catalogue import Predicate
from assertkit.dispatch import RESERVED_PREFIXES
from assertkit.plugins.hookspecs import PROJECT_NAME, AssertKitHookSpec

DEFAULT_ENTRY_POINT_GROUP = "assertkit.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and predicate collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AssertKitHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, group: str = DEFAULT_ENTRY_POINT_GROUP) -> list[str]:
        """Load plugins advertised under the *group* entry-point group.

        Returns a list of loaded plugin names.
        """
        try:
            self._pm.load_setuptools_entrypoints(group)
        except Exception:
            logger.warning("Failed to load plugins from entry point group %s", group, exc_info=True)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_assertions(self, reserved: Mapping[str, Predicate]) -> dict[str, Predicate]:
        """Gather plugin predicates that do not clash with *reserved* names.

        Invalid registrations are logged and skipped; one broken plugin
        never blocks the others.
        """
        collected: dict[str, Predicate] = {}
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            for name, predicate in self._plugin_assertions(plugin, plugin_name).items():
                problem = _registration_problem(name, predicate, reserved, collected)
                if problem:
                    logger.warning(
                        "Skipping assertion %r from plugin %s: %s", name, plugin_name, problem
                    )
                    continue
                collected[name] = predicate
                logger.debug("Registered assertion %s from plugin %s", name, plugin_name)
        return collected

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _plugin_assertions(plugin: object, plugin_name: str) -> dict[str, Predicate]:
        hook = getattr(plugin, "register_assertions", None)
        if hook is None:
            return {}

        try:
            assertion_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect assertions from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return {}

        if assertion_map is None:
            return {}
        if not isinstance(assertion_map, dict):
            logger.warning("Plugin %s returned non-dict assertion registrations", plugin_name)
            return {}
        return assertion_map

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("assertkit")`` sets an ``assertkit_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False


def _registration_problem(
    name: object,
    predicate: object,
    reserved: Mapping[str, Predicate],
    collected: Mapping[str, Predicate],
) -> str | None:
    if not isinstance(name, str) or not name.isidentifier():
        return "name must be a valid identifier"
    if name.startswith(RESERVED_PREFIXES):
        return "name uses a reserved prefix"
    if name in reserved:
        return "conflicts with a built-in assertion"
    if name in collected and collected[name] is not predicate:
        return "already registered by another plugin"
    if not callable(predicate):
        return "not callable"
    return None
