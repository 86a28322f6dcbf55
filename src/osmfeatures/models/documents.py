"""Typed shapes of the raw JSON documents.

Decoded JSON is validated against these models before any domain object is
built, so shape errors surface as pydantic ``ValidationError`` with a path.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter

from ..domain.preset import GeometryType


class PresetDocument(BaseModel):
    """One entry of the base preset file."""

    model_config = ConfigDict(populate_by_name=True)

    tags: dict[StrictStr, StrictStr] = Field(default_factory=dict)
    geometry: list[GeometryType] | None = None
    country_codes: list[StrictStr] = Field(default_factory=list, alias="countryCodes")
    name: StrictStr | None = None
    suggestion: StrictBool = False
    terms: list[StrictStr] = Field(default_factory=list)
    match_score: float = Field(default=1.0, alias="matchScore")
    searchable: StrictBool = True
    add_tags: dict[StrictStr, StrictStr] | None = Field(default=None, alias="addTags")


class LocalizationEntry(BaseModel):
    """Localizable fields of one preset. ``None`` means not overridden."""

    name: StrictStr | None = None
    terms: list[StrictStr] | None = None


PRESETS_ADAPTER: TypeAdapter[dict[str, PresetDocument]] = TypeAdapter(dict[str, PresetDocument])
LOCALIZATIONS_ADAPTER: TypeAdapter[dict[str, LocalizationEntry]] = TypeAdapter(
    dict[str, LocalizationEntry]
)
