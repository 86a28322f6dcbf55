"""Pydantic-based runtime settings.

Loads from environment variables prefixed ``OSMFEATURES_`` (with optional
.env file).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Configuration for preset loading, validated at startup."""

    model_config = SettingsConfigDict(
        env_prefix="OSMFEATURES_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # --- Files ---
    data_dir: Path = Field(default=Path("data"), description="Directory holding preset files")
    presets_file: str = Field(default="presets.json", description="Base preset file name")

    # --- Parsing ---
    wildcard_value: str = Field(default="*", min_length=1, description="Tag value meaning 'any value'")

    # --- Caching ---
    cache_overlays: bool = Field(
        default=True,
        description="Reuse parsed localization files across locales that share them",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Level for the osmfeatures logger")

    @field_validator("presets_file")
    @classmethod
    def _flat_name(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"presets_file must be a flat file name, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
