"""Parse a localization overlay document."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..domain.errors import LocalizationLoadError
from ..models.documents import LOCALIZATIONS_ADAPTER, LocalizationEntry


def parse_localizations(raw: Any, file_name: str) -> dict[str, LocalizationEntry]:
    """Return preset id -> localized fields. Unknown ids are kept; merging ignores them."""
    try:
        return LOCALIZATIONS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise LocalizationLoadError(file_name, f"invalid localization document: {e}") from e
