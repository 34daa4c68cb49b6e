"""Application service layer for the outliner.

Services combine outline edits with the cursor re-addressing each edit
requires. They take the current time as a parameter and perform no I/O.

Example usage:
    >>> from outliner.application import toggle_todo
    >>> from outliner.domain.shared import is_ok
    >>>
    >>> result = toggle_todo(outline, cursor, now)
    >>> if is_ok(result):
    ...     print("done" if result.value else "active")
"""

from outliner.application.outline_service import (
    DEFAULT_GROUP_NAME,
    ServiceError,
    activate_item,
    add_group,
    add_todo,
    add_top_group,
    archive_sweep,
    archive_todo,
    clean_archives,
    edit_todo,
    ensure_top_group,
    hide_group,
    move_group_down,
    move_group_up,
    move_todo_down,
    move_todo_up,
    rename_group,
    select_row,
    toggle_group,
    toggle_todo,
)

__all__ = [
    "DEFAULT_GROUP_NAME",
    "ServiceError",
    # Toggling
    "toggle_group",
    "toggle_todo",
    "activate_item",
    # Archiving
    "archive_todo",
    "hide_group",
    "archive_sweep",
    "clean_archives",
    # Adding and editing
    "add_todo",
    "edit_todo",
    "add_group",
    "rename_group",
    "add_top_group",
    "ensure_top_group",
    # Reordering
    "move_group_up",
    "move_group_down",
    "move_todo_up",
    "move_todo_down",
    # Pointer selection
    "select_row",
]
