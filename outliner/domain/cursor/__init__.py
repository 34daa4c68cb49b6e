"""Cursor domain - index-path addressing over the outline.

Key Types:
    PositionHierarchy - The cursor (a list of child indices)
    HierarchyItem - A resolved selection and its depth
    HierarchySlot - A resolved selection with its owning container
    MoveError - NO_INDEX, GROUP_NOT_FOUND, OUT_OF_BOUNDS
"""

from .position import (
    DEFAULT_TERMINAL_SIZE,
    HierarchyItem,
    HierarchySlot,
    MoveError,
    PositionHierarchy,
    rendered_rows,
)

__all__ = [
    "DEFAULT_TERMINAL_SIZE",
    "HierarchyItem",
    "HierarchySlot",
    "MoveError",
    "PositionHierarchy",
    "rendered_rows",
]
