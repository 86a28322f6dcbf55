"""Domain layer for osmfeatures."""

from .errors import LocalizationLoadError, PresetError, PresetLoadError
from .locale import Locale
from .preset import GeometryType, Preset

__all__ = [
    "GeometryType",
    "Locale",
    "LocalizationLoadError",
    "Preset",
    "PresetError",
    "PresetLoadError",
]
