"""Outline application service.

Every edit the user can make to the outline, each paired with the cursor
bookkeeping it needs. Functions take the current time as an argument and
perform no I/O, so the periodic sweep and the key handlers can share them.

Each function returns ``Ok`` when it handled the selection (including a
no-op at a boundary) and ``Err`` when the selection is not something it
applies to, so a key bound to several commands can fall through to the
next one.
"""

import logging
from datetime import datetime

from outliner.domain.cursor import HierarchySlot, MoveError, PositionHierarchy
from outliner.domain.outline import Group, Outline, Todo, archive_sweep as sweep_group, clear_archives
from outliner.domain.shared import Err, Ok, Result

logger = logging.getLogger(__name__)

ServiceError = MoveError | str

DEFAULT_GROUP_NAME = "Todo"


def _select(outline: Outline, cursor: PositionHierarchy) -> Result[HierarchySlot, MoveError]:
    slot = cursor.find_item_mut(outline)
    if isinstance(slot, Err) and slot.error is MoveError.NO_INDEX:
        logger.error(f"Cursor path is empty: {slot.error.message}")
    return slot


def _select_group(outline: Outline, cursor: PositionHierarchy) -> Result[HierarchySlot, ServiceError]:
    slot = _select(outline, cursor)
    if isinstance(slot, Err):
        return slot
    if not isinstance(slot.value.item, Group):
        return Err("Selected item is not a group")
    return slot


def _select_todo(outline: Outline, cursor: PositionHierarchy) -> Result[HierarchySlot, ServiceError]:
    slot = _select(outline, cursor)
    if isinstance(slot, Err):
        return slot
    if not isinstance(slot.value.item, Todo):
        return Err("Selected item is not a todo")
    return slot


# =============================================================================
# Toggling
# =============================================================================


def toggle_group(outline: Outline, cursor: PositionHierarchy) -> Result[bool, ServiceError]:
    """Collapse or expand the selected group.

    Returns:
        Ok(new open state)
    """
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    group = slot.value.item
    group.open = not group.open
    return Ok(group.open)


def toggle_todo(
    outline: Outline,
    cursor: PositionHierarchy,
    now: datetime,
) -> Result[bool, ServiceError]:
    """Mark the selected todo done, or undone if it already is.

    The todo moves to the end of ``completed`` (or back to the end of
    ``todos``) and the cursor follows it.

    Returns:
        Ok(True) if the todo is now done, Ok(False) if active again
    """
    slot = _select_todo(outline, cursor)
    if isinstance(slot, Err):
        return slot
    parent = slot.value.parent
    todo = slot.value.container.pop(slot.value.offset)

    if slot.value.container is parent.todos:
        todo.done_time = now
        parent.completed.append(todo)
        position = len(parent) - 1
    else:
        todo.done_time = None
        parent.todos.append(todo)
        position = len(parent.subgroups) + len(parent.todos) - 1

    cursor.set_last(position)
    return Ok(todo.is_done())


def activate_item(
    outline: Outline,
    cursor: PositionHierarchy,
    now: datetime,
) -> Result[bool, ServiceError]:
    """Toggle whatever is selected: a group's open state or a todo's done state."""
    found = cursor.find_item(outline)
    if isinstance(found, Err):
        return found
    if isinstance(found.value.item, Group):
        return toggle_group(outline, cursor)
    return toggle_todo(outline, cursor, now)


# =============================================================================
# Archiving
# =============================================================================


def archive_todo(outline: Outline, cursor: PositionHierarchy) -> Result[Todo, ServiceError]:
    """Move the selected todo into its group's archive."""
    slot = _select_todo(outline, cursor)
    if isinstance(slot, Err):
        return slot
    todo = slot.value.container.pop(slot.value.offset)
    slot.value.parent.todo_archive.append(todo)

    clamped = cursor.clamp_after_removal(outline)
    if isinstance(clamped, Err):
        return clamped
    return Ok(todo)


def hide_group(outline: Outline, cursor: PositionHierarchy) -> Result[Group, ServiceError]:
    """Move the selected group into its parent's archive.

    Root groups go to ``outline.archive_groups``.
    """
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    group = slot.value.container.pop(slot.value.offset)
    group.hidden = True
    if slot.value.parent is None:
        outline.archive_groups.append(group)
    else:
        slot.value.parent.subgroup_archive.append(group)

    clamped = cursor.clamp_after_removal(outline)
    if isinstance(clamped, Err):
        return clamped
    return Ok(group)


def archive_sweep(
    outline: Outline,
    now: datetime | None,
    cursor: PositionHierarchy | None = None,
) -> int:
    """Archive completed todos older than ``outline.archive_time``.

    Skipped entirely when ``now`` is unknown. The cursor, if given, is
    re-normalized since archived todos may have been above it.

    Returns:
        Number of todos archived
    """
    if now is None:
        logger.debug("Skipping archive sweep: local time unavailable")
        return 0

    archived = sum(sweep_group(group, now, outline.archive_time) for group in outline.groups)
    if archived:
        logger.info(f"Archived {archived} completed todos")
        if cursor is not None:
            cursor.normalize(outline)
    return archived


def clean_archives(outline: Outline) -> int:
    """Permanently drop everything in every archive container.

    Returns:
        Number of archived items discarded
    """
    dropped = len(outline.archive_groups)
    outline.archive_groups = []
    dropped += sum(clear_archives(group) for group in outline.groups)
    logger.info(f"Cleared {dropped} archived items")
    return dropped


# =============================================================================
# Adding and editing
# =============================================================================


def add_todo(
    outline: Outline,
    cursor: PositionHierarchy,
    name: str,
    due: datetime | None,
    now: datetime,
) -> Result[Todo, ServiceError]:
    """Append a new todo to the selected group."""
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    todo = Todo(name=name, due=due, created=now)
    slot.value.item.todos.append(todo)
    return Ok(todo)


def edit_todo(
    outline: Outline,
    cursor: PositionHierarchy,
    name: str,
    due: datetime | None,
) -> Result[Todo, ServiceError]:
    """Rename the selected todo and replace its due date.

    An empty name keeps the current one.
    """
    slot = _select_todo(outline, cursor)
    if isinstance(slot, Err):
        return slot
    todo = slot.value.item
    if name.strip():
        todo.name = name.strip()
    todo.due = due
    return Ok(todo)


def add_group(outline: Outline, cursor: PositionHierarchy, name: str) -> Result[Group, ServiceError]:
    """Append a new (open) subgroup to the selected group."""
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    group = Group(name=name)
    slot.value.item.subgroups.append(group)
    return Ok(group)


def rename_group(outline: Outline, cursor: PositionHierarchy, name: str) -> Result[Group, ServiceError]:
    """Rename the selected group; an empty name keeps the current one."""
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    group = slot.value.item
    if name.strip():
        group.name = name.strip()
    return Ok(group)


def add_top_group(outline: Outline, name: str) -> Group:
    """Append a new (open) root group."""
    group = Group(name=name)
    outline.groups.append(group)
    return group


def ensure_top_group(
    outline: Outline,
    cursor: PositionHierarchy,
    name: str = DEFAULT_GROUP_NAME,
) -> bool:
    """Give an empty forest a root group so the cursor has something to select.

    Returns:
        True if a group was created
    """
    if outline.groups:
        return False
    add_top_group(outline, name)
    cursor.reset()
    logger.info(f"Outline was empty, created group {name!r}")
    return True


# =============================================================================
# Reordering
# =============================================================================


def _swap(items: list, offset: int, step: int, cursor: PositionHierarchy) -> None:
    target = offset + step
    if 0 <= target < len(items):
        items[offset], items[target] = items[target], items[offset]
        cursor.indexes[-1] += step


def move_group_up(outline: Outline, cursor: PositionHierarchy) -> Result[None, ServiceError]:
    """Swap the selected group with the previous sibling group."""
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    _swap(slot.value.container, slot.value.offset, -1, cursor)
    return Ok(None)


def move_group_down(outline: Outline, cursor: PositionHierarchy) -> Result[None, ServiceError]:
    """Swap the selected group with the next sibling group."""
    slot = _select_group(outline, cursor)
    if isinstance(slot, Err):
        return slot
    _swap(slot.value.container, slot.value.offset, 1, cursor)
    return Ok(None)


def move_todo_up(outline: Outline, cursor: PositionHierarchy) -> Result[None, ServiceError]:
    """Swap the selected active todo with the previous one.

    Completed todos keep their completion order and are not moved.
    """
    slot = _select_todo(outline, cursor)
    if isinstance(slot, Err):
        return slot
    if slot.value.container is slot.value.parent.todos:
        _swap(slot.value.container, slot.value.offset, -1, cursor)
    return Ok(None)


def move_todo_down(outline: Outline, cursor: PositionHierarchy) -> Result[None, ServiceError]:
    """Swap the selected active todo with the next one."""
    slot = _select_todo(outline, cursor)
    if isinstance(slot, Err):
        return slot
    if slot.value.container is slot.value.parent.todos:
        _swap(slot.value.container, slot.value.offset, 1, cursor)
    return Ok(None)


# =============================================================================
# Pointer selection
# =============================================================================


def select_row(outline: Outline, cursor: PositionHierarchy, row: int) -> Result[None, ServiceError]:
    """Put the cursor on visual row ``row`` by stepping down from the top.

    Rows past the end leave the cursor on the last row.
    """
    cursor.reset()
    for _ in range(row):
        stepped = cursor.cursor_down(outline)
        if isinstance(stepped, Err):
            return stepped
    return Ok(None)
