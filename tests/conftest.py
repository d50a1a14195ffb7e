"""Shared pytest fixtures and test helpers for assertkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from assertkit.catalogue import CATALOGUE
from assertkit.dispatch import AssertionRegistry


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config and ASSERTKIT_* variables out of every test."""
    for var in (
        "ASSERTKIT_CONFIG",
        "ASSERTKIT_PLUGINS__ENABLED",
        "ASSERTKIT_LOGGING__VERBOSE",
        "ASSERTKIT_LOGGING__JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def registry() -> AssertionRegistry:
    """Registry over the built-in catalogue only (no plugins)."""
    return AssertionRegistry(CATALOGUE)


class CustomError(Exception):
    """Caller-chosen error type used across tests."""


class NotAnError:
    """Constructible from a message, but not an exception."""

    def __init__(self, message: str = "") -> None:
        self.message = message
