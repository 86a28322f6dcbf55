"""Preset loading errors."""


class PresetError(Exception):
    """Base error for the preset system."""


class PresetLoadError(PresetError):
    """Raised when the base preset file is missing, unreadable or malformed."""


class LocalizationLoadError(PresetError):
    """Raised when an existing localization file cannot be decoded."""

    def __init__(self, file_name: str, message: str) -> None:
        super().__init__(f"{file_name}: {message}")
        self.file_name = file_name
