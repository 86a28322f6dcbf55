"""Display locale as a (language, region) pair."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SEPARATOR_RE = re.compile(r"[-_]")
_SCRIPT_RE = re.compile(r"^[A-Za-z]{4}$")
_REGION_RE = re.compile(r"^(?:[A-Za-z]{2}|[0-9]{3})$")


class Locale(BaseModel):
    """Language with an optional region, e.g. ``de`` or ``de-AT``."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., min_length=1, description="ISO 639 language code")
    region: str | None = Field(default=None, description="ISO 3166 or UN M.49 region code")

    # Before-mode so the length check sees the stripped value.
    @field_validator("language", mode="before")
    @classmethod
    def _lower_language(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("region", mode="before")
    @classmethod
    def _upper_region(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or None
        return v

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse a BCP 47 style tag such as ``de``, ``de-AT``, ``de_AT`` or ``zh-Hant-TW``.

        A script subtag is skipped; the region is the first two-letter or
        three-digit subtag after the language. Variants are ignored.
        """
        parts = _SEPARATOR_RE.split(tag.strip())
        language = parts[0]
        if not language:
            raise ValueError(f"locale tag has no language: {tag!r}")
        region = None
        for part in parts[1:]:
            if _SCRIPT_RE.match(part):
                continue
            if _REGION_RE.match(part):
                region = part
            break
        return cls(language=language, region=region)

    @property
    def tag(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    def __str__(self) -> str:
        return self.tag
