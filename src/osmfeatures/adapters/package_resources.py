"""Adapter: FileAccess over data files bundled inside a Python package."""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from typing import BinaryIO

from ._names import check_flat_name


class PackageResourceAccess:
    """Concrete FileAccess backed by ``importlib.resources``.

    Works for packages installed from wheels, zip imports and source trees
    alike, the way an application asset store would.
    """

    def __init__(self, package: str, base_path: str = "") -> None:
        self._package = package
        self._base_path = base_path.strip("/")

    def _root(self) -> Traversable:
        root = resources.files(self._package)
        for part in self._base_path.split("/"):
            if part:
                root = root.joinpath(part)
        return root

    def exists(self, name: str) -> bool:
        return self._root().joinpath(check_flat_name(name)).is_file()

    def open(self, name: str) -> BinaryIO:
        resource = self._root().joinpath(check_flat_name(name))
        if not resource.is_file():
            raise FileNotFoundError(f"{self._package}:{self._base_path}/{name}")
        return resource.open("rb")
