"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from assertkit.plugins.hookspecs import AssertKitHookSpec, hookimpl
from assertkit.plugins.manager import PluginManager

__all__ = ["AssertKitHookSpec", "PluginManager", "hookimpl"]
