"""Concrete FileAccess adapters."""

from .filesystem import FileSystemAccess
from .package_resources import PackageResourceAccess

__all__ = ["FileSystemAccess", "PackageResourceAccess"]
