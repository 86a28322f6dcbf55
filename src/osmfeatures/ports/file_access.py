"""Port: named resource file access supplied by the host."""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class FileAccess(Protocol):
    """Existence check and readable stream over a flat namespace of files."""

    def exists(self, name: str) -> bool: ...

    def open(self, name: str) -> BinaryIO: ...
