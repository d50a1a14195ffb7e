"""The predicate catalogue.

Importing this package registers every built-in predicate into
:data:`CATALOGUE`. Submodules group predicates by concern only; the
catalogue itself is one flat name -> function table.
"""

from __future__ import annotations

from assertkit.catalogue import (  # noqa: F401
    collections,
    comparison,
    filesystem,
    network,
    objects,
    strings,
    types,
)
from assertkit.catalogue.base import CATALOGUE, Predicate, assertion, fail

__all__ = ["CATALOGUE", "Predicate", "assertion", "fail"]
