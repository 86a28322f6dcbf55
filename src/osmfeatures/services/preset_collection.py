"""PresetCollection: base presets plus cached per-locale merged views.

The base file is read once at construction. Each distinct requested locale
gets its own merged view, built on first request from the localization files
of its fallback chain and cached for the lifetime of the collection.
"""

from __future__ import annotations

import threading
from typing import Any

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.errors import LocalizationLoadError, PresetLoadError
from ..domain.locale import Locale
from ..domain.preset import Preset
from ..models.documents import LocalizationEntry
from ..observability import get_logger
from ..parsers.localizations import parse_localizations
from ..parsers.presets import parse_presets
from ..parsers.reader import read_json
from ..ports.file_access import FileAccess
from .locale_resolver import LocaleResolver

LocaleLike = Locale | str | None


class PresetCollection:
    """Queryable preset catalog, localized on demand."""

    def __init__(
        self,
        file_access: FileAccess,
        settings: RuntimeSettings | None = None,
        locale_resolver: LocaleResolver | None = None,
        logger: Any = None,
    ) -> None:
        settings = settings or get_settings()
        self._files = file_access
        self._resolver = locale_resolver or LocaleResolver(file_access)
        self._cache_overlays = settings.cache_overlays
        self._logger = logger or get_logger()

        self._lock = threading.Lock()
        self._views: dict[Locale, dict[str, Preset]] = {}
        self._overlays: dict[str, dict[str, LocalizationEntry]] = {}

        self._base = self._load_base(settings.presets_file, settings.wildcard_value)

    @classmethod
    def load(
        cls, file_access: FileAccess, settings: RuntimeSettings | None = None
    ) -> PresetCollection:
        """Read the base preset file; raises PresetLoadError if it is unusable."""
        return cls(file_access, settings=settings)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self, locale: LocaleLike = None) -> list[Preset]:
        """Every preset of the locale's merged view, unfiltered."""
        return list(self._view(locale).values())

    def get(self, preset_id: str, locale: LocaleLike = None) -> Preset | None:
        """Preset by id in the locale's merged view, or None if no such id."""
        return self._view(locale).get(preset_id)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load_base(self, file_name: str, wildcard: str) -> dict[str, Preset]:
        if not self._files.exists(file_name):
            raise PresetLoadError(f"preset file not found: {file_name}")
        try:
            raw = read_json(self._files, file_name)
        except (OSError, ValueError) as e:
            raise PresetLoadError(f"cannot read preset file {file_name}: {e}") from e
        presets = parse_presets(raw, wildcard=wildcard)
        self._logger.info(
            "presets_loaded",
            extra={"file": file_name, "presets_count": len(presets)},
        )
        return presets

    def _view(self, locale: LocaleLike) -> dict[str, Preset]:
        if locale is None:
            return self._base
        if isinstance(locale, str):
            locale = Locale.parse(locale)

        with self._lock:
            view = self._views.get(locale)
        if view is not None:
            return view

        # Built outside the lock; a concurrent builder for the same locale
        # may win the insert, in which case its view is returned instead.
        view = self._build_view(locale)
        with self._lock:
            return self._views.setdefault(locale, view)

    def _build_view(self, locale: Locale) -> dict[str, Preset]:
        files = self._resolver.existing_files(locale)
        view = dict(self._base)
        for file_name in files:
            for preset_id, entry in self._overlay(file_name).items():
                preset = view.get(preset_id)
                if preset is None:
                    continue
                view[preset_id] = preset.localized(name=entry.name, terms=entry.terms)
        self._logger.info(
            "locale_view_built",
            extra={"locale": locale.tag, "files": files, "presets_count": len(view)},
        )
        return view

    def _overlay(self, file_name: str) -> dict[str, LocalizationEntry]:
        if self._cache_overlays:
            with self._lock:
                cached = self._overlays.get(file_name)
            if cached is not None:
                return cached

        try:
            raw = read_json(self._files, file_name)
        except (OSError, ValueError) as e:
            raise LocalizationLoadError(file_name, f"cannot read localization file: {e}") from e
        overlay = parse_localizations(raw, file_name)
        self._logger.info(
            "localization_loaded",
            extra={"file": file_name, "entries_count": len(overlay)},
        )

        if self._cache_overlays:
            with self._lock:
                overlay = self._overlays.setdefault(file_name, overlay)
        return overlay
