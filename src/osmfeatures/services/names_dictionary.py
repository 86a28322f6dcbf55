"""NamesDictionary: localized names for a map element's tags.

Matching is exact: a preset applies when all of its tags are present on the
element with the same values.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..domain.locale import Locale
from ..domain.preset import GeometryType, Preset
from .preset_collection import PresetCollection


class NamesDictionary:
    """Look up presets by tag signature in a given locale."""

    def __init__(self, collection: PresetCollection) -> None:
        self._collection = collection

    def get(
        self,
        tags: Mapping[str, str],
        geometry: GeometryType | None = None,
        locale: Locale | str | None = None,
        country_code: str | None = None,
        include_suggestions: bool = False,
    ) -> list[Preset]:
        """Named presets matching ``tags``, most specific first.

        Ordered by number of matched tags, then match score, then id.
        """
        matches = [
            preset
            for preset in self._collection.get_all(locale)
            if preset.name
            and _tags_match(preset, tags)
            and (geometry is None or geometry in preset.geometry)
            and _country_matches(preset, country_code)
            and (include_suggestions or not preset.suggestion)
        ]
        matches.sort(key=lambda p: (-len(p.tags), -p.match_score, p.id))
        return matches

    def by_id(self, preset_id: str, locale: Locale | str | None = None) -> Preset | None:
        return self._collection.get(preset_id, locale)


def _tags_match(preset: Preset, tags: Mapping[str, str]) -> bool:
    return all(tags.get(key) == value for key, value in preset.tags.items())


def _country_matches(preset: Preset, country_code: str | None) -> bool:
    if not preset.country_codes or country_code is None:
        return True
    return country_code.upper() in (c.upper() for c in preset.country_codes)
