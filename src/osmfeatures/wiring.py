"""Composition root: single place where all wiring happens.

Call ``build_preset_collection()`` or ``build_names_dictionary()`` to get a
fully-constructed service reading from ``settings.data_dir``.
"""

from __future__ import annotations

from .adapters.filesystem import FileSystemAccess
from .config.runtime import RuntimeSettings, get_settings
from .observability import configure_logging
from .services.names_dictionary import NamesDictionary
from .services.preset_collection import PresetCollection


def build_preset_collection(settings: RuntimeSettings | None = None) -> PresetCollection:
    """Construct a PresetCollection over the configured data directory."""
    settings = settings or get_settings()
    logger = configure_logging(settings.log_level)
    return PresetCollection(
        file_access=FileSystemAccess(settings.data_dir),
        settings=settings,
        logger=logger,
    )


def build_names_dictionary(settings: RuntimeSettings | None = None) -> NamesDictionary:
    """Construct a NamesDictionary over a fresh PresetCollection."""
    return NamesDictionary(build_preset_collection(settings))
