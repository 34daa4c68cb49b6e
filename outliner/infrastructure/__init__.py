"""Infrastructure layer for the outliner.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - OutlineRepository: Outline document persistence

    Clock:
        - now_local: Local time, or None when unavailable
        - now_or_utc: Local time with a UTC fallback
"""

from outliner.infrastructure.clock import now_local, now_or_utc
from outliner.infrastructure.storage import JsonStorage, OutlineRepository

__all__ = [
    # Storage
    "JsonStorage",
    "OutlineRepository",
    # Clock
    "now_local",
    "now_or_utc",
]
