"""osmfeatures: localized OpenStreetMap feature presets."""

from .domain import (
    GeometryType,
    Locale,
    LocalizationLoadError,
    Preset,
    PresetError,
    PresetLoadError,
)
from .ports import FileAccess
from .services import LocaleResolver, NamesDictionary, PresetCollection

__version__ = "0.1.0"
__all__ = [
    "FileAccess",
    "GeometryType",
    "Locale",
    "LocaleResolver",
    "LocalizationLoadError",
    "NamesDictionary",
    "Preset",
    "PresetCollection",
    "PresetError",
    "PresetLoadError",
]
