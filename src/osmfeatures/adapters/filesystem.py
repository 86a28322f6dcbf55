"""Adapter: FileAccess over a directory on the local filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from ._names import check_flat_name


class FileSystemAccess:
    """Concrete FileAccess reading files from ``base_dir``."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def exists(self, name: str) -> bool:
        return (self._base_dir / check_flat_name(name)).is_file()

    def open(self, name: str) -> BinaryIO:
        return (self._base_dir / check_flat_name(name)).open("rb")
