"""LocaleResolver: localization file names for a locale's fallback chain."""

from __future__ import annotations

from ..domain.locale import Locale
from ..ports.file_access import FileAccess


class LocaleResolver:
    """Map a locale to its candidate localization files, most general first."""

    def __init__(self, file_access: FileAccess, suffix: str = ".json") -> None:
        self._files = file_access
        self._suffix = suffix

    def fallback_chain(self, locale: Locale) -> list[str]:
        """``de-AT`` -> ``["de.json", "de-AT.json"]``; ``de`` -> ``["de.json"]``."""
        chain = [f"{locale.language}{self._suffix}"]
        if locale.region:
            chain.append(f"{locale.language}-{locale.region}{self._suffix}")
        return chain

    def existing_files(self, locale: Locale) -> list[str]:
        """The fallback chain without the files the host does not have."""
        return [name for name in self.fallback_chain(locale) if self._files.exists(name)]
