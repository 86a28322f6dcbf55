"""Raw document models."""

from .documents import (
    LOCALIZATIONS_ADAPTER,
    PRESETS_ADAPTER,
    LocalizationEntry,
    PresetDocument,
)

__all__ = [
    "LOCALIZATIONS_ADAPTER",
    "PRESETS_ADAPTER",
    "LocalizationEntry",
    "PresetDocument",
]
