"""Storage infrastructure for the outliner.

Persistence for the outline document, using Result monads for explicit
error handling.
"""

from outliner.infrastructure.storage.json_storage import JsonStorage
from outliner.infrastructure.storage.repositories import OutlineRepository

__all__ = [
    "JsonStorage",
    "OutlineRepository",
]
