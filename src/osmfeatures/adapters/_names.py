"""Shared validation for flat resource names."""

from __future__ import annotations


def check_flat_name(name: str) -> str:
    """Reject names that would leave the resource directory."""
    if not name or "/" in name or "\\" in name or name in (".", ".."):
        raise ValueError(f"resource name must be a flat file name, got {name!r}")
    return name
