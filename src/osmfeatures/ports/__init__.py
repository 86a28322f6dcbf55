"""Port interfaces (Protocols).

Services depend only on these, never on concrete adapters.
"""

from .file_access import FileAccess

__all__ = ["FileAccess"]
