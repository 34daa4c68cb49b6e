"""Outline domain - the tree of groups and todos.

Key Types:
    Todo - Leaf item with optional due date and completion time
    Group - Container of subgroups, todos and completed todos
    Keybindings - Key to command mapping stored with the document
    Outline - The document: root groups, archived groups, settings

Traversal Functions:
    traverse / traverse_mut - Pre/post-order fold over a group
    traverse_forest - Same, over every root group
    todo_count - Active todos in a full subtree
    archive_sweep - Move aged completed todos into the archive
    clear_archives - Empty every archive container

Date Functions:
    parse_due - Parse a typed due date
    describe_due - Relative or absolute due annotation
    due_style - Row colour from due date and done state
"""

from .dates import DUE_FORMAT, describe_due, due_style, humanize_delta, parse_due
from .models import Group, Keybindings, Outline, Todo
from .traversal import (
    SweepState,
    always_descend,
    archive_sweep,
    clear_archives,
    keep_group,
    keep_todo,
    todo_count,
    traverse,
    traverse_forest,
    traverse_mut,
)

__all__ = [
    # Models
    "Todo",
    "Group",
    "Keybindings",
    "Outline",
    # Traversal - fundamental
    "traverse",
    "traverse_mut",
    "traverse_forest",
    # Traversal - visitors
    "always_descend",
    "keep_group",
    "keep_todo",
    # Traversal - high-level
    "SweepState",
    "todo_count",
    "archive_sweep",
    "clear_archives",
    # Dates
    "DUE_FORMAT",
    "parse_due",
    "describe_due",
    "due_style",
    "humanize_delta",
]
