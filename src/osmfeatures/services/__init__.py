"""Services: locale resolution, preset collection, names dictionary."""

from .locale_resolver import LocaleResolver
from .names_dictionary import NamesDictionary
from .preset_collection import PresetCollection

__all__ = [
    "LocaleResolver",
    "NamesDictionary",
    "PresetCollection",
]
