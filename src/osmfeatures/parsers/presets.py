"""Build Preset records from the base preset document."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ..domain.errors import PresetLoadError
from ..domain.preset import GeometryType, Preset
from ..models.documents import PRESETS_ADAPTER, PresetDocument

_LOGGER = logging.getLogger(__name__)

WILDCARD = "*"


def parse_presets(raw: Any, wildcard: str = WILDCARD) -> dict[str, Preset]:
    """Validate a decoded base document and return presets keyed by id.

    Entries with empty tags or a wildcard tag value are dropped. Any shape
    error, including an unknown geometry token, fails the whole document.
    """
    try:
        documents = PRESETS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise PresetLoadError(f"invalid preset document: {e}") from e

    presets: dict[str, Preset] = {}
    for preset_id, doc in documents.items():
        reason = _drop_reason(doc, wildcard)
        if reason:
            _LOGGER.warning("preset_dropped", extra={"preset_id": preset_id, "reason": reason})
            continue
        presets[preset_id] = _to_preset(preset_id, doc)
    return presets


def _drop_reason(doc: PresetDocument, wildcard: str) -> str | None:
    if not doc.tags:
        return "empty_tags"
    if wildcard in doc.tags.values():
        return "wildcard_tag"
    return None


def _to_preset(preset_id: str, doc: PresetDocument) -> Preset:
    if doc.geometry is None:
        geometry = [GeometryType.point]
    else:
        geometry = list(dict.fromkeys(doc.geometry))
    return Preset(
        id=preset_id,
        tags=doc.tags,
        geometry=geometry,
        country_codes=list(dict.fromkeys(doc.country_codes)),
        name=doc.name,
        suggestion=doc.suggestion,
        terms=doc.terms,
        match_score=doc.match_score,
        searchable=doc.searchable,
        add_tags=doc.add_tags,
    )
