"""Document parsers: base presets and localization overlays."""

from .localizations import parse_localizations
from .presets import WILDCARD, parse_presets
from .reader import read_json

__all__ = ["WILDCARD", "parse_localizations", "parse_presets", "read_json"]
