"""Pluggy hook specifications for assertkit extensions.

One setup-time hook lets plugins contribute predicates to the default
registry. It is collected once, before the registry is frozen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from assertkit.catalogue import Predicate

PROJECT_NAME = "assertkit"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class AssertKitHookSpec:
    """Hook specifications for the assertkit plugin system."""

    @hookspec
    def register_assertions(self) -> dict[str, Predicate] | None:
        """Return name -> predicate mappings to add to the catalogue.

        Each predicate must follow the standard invocation protocol:
        ``(value, *operands, message="", error_type=...) -> None``.
        """
