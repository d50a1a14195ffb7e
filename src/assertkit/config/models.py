"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, assertkit.toml only contains
overrides. An absent file means every default applies.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    entry_point_group: str = "assertkit.plugins"


class LoggingConfig(BaseModel):
    """[logging] section. ``json`` in TOML maps to ``json_output``."""

    model_config = {"frozen": True, "populate_by_name": True}

    verbose: bool = False
    json_output: bool = Field(default=False, alias="json")
