"""Preset domain model."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, model_validator

# Read-only view over a validated copy; dumps back to a plain dict.
Tags = Annotated[
    Mapping[str, str],
    AfterValidator(lambda v: MappingProxyType(dict(v))),
    PlainSerializer(dict, return_type=dict),
]


class GeometryType(str, Enum):
    """Kinds of map elements a preset can describe."""

    point = "point"
    vertex = "vertex"
    line = "line"
    area = "area"
    relation = "relation"


class Preset(BaseModel):
    """A named, taggable map feature with a concrete tag signature.

    Instances are shared between the base set and every localized view, so
    all containers are read-only: mappings are ``MappingProxyType`` and
    sequences are tuples.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique preset identifier")
    tags: Tags = Field(..., description="Tags that identify the feature")
    geometry: tuple[GeometryType, ...] = Field(
        default=(GeometryType.point,),
        description="Geometry kinds this preset applies to",
    )
    country_codes: tuple[str, ...] = Field(
        default=(), description="ISO country codes; empty means everywhere"
    )
    name: str | None = Field(default=None, description="Display name")
    suggestion: bool = Field(default=False, description="Brand suggestion rather than generic feature")
    terms: tuple[str, ...] = Field(default=(), description="Search synonyms")
    match_score: float = Field(default=1.0, description="Weight for search ranking")
    searchable: bool = Field(default=True, description="Whether search listings include it")
    add_tags: Tags = Field(
        default_factory=dict, description="Tags applied when the preset is chosen; defaults to tags"
    )

    @model_validator(mode="before")
    @classmethod
    def _add_tags_default_to_tags(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("add_tags") is None and "tags" in data:
            return {**data, "add_tags": data["tags"]}
        return data

    def localized(self, name: str | None = None, terms: list[str] | None = None) -> Preset:
        """Return a copy with name and/or terms replaced; None leaves a field as is."""
        update: dict = {}
        if name is not None:
            update["name"] = name
        if terms is not None:
            update["terms"] = tuple(terms)
        if not update:
            return self
        return self.model_copy(update=update)
