"""Decode JSON documents from a FileAccess port."""

from __future__ import annotations

import json
from typing import Any

from ..ports.file_access import FileAccess


def read_json(file_access: FileAccess, name: str) -> Any:
    """Open ``name`` and decode it. Repeated object keys keep the last value."""
    with file_access.open(name) as stream:
        return json.load(stream)
