"""Tree traversal over outline groups.

One fold drives rendering, counting and bulk edits. A traversal visits a
group in pre-order, lets the ``pre_handle`` decide whether to descend, then
visits subgroups (each fully, including its own ``post_handle``), then the
group's ``todos`` and ``completed`` in that order, and finally calls
``post_handle``. The accumulator is threaded linearly through every call;
it is the only channel for results and for read-only context.

Callers that need collapse awareness (rendering) descend only into open
groups; callers that need the full subtree (counting, sweeping) always
descend.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TypeVar

from .models import Group, Todo

T = TypeVar("T")

PreHandle = Callable[[Group, int, T], tuple[bool, T]]
TodoHandle = Callable[[Todo, int, T], T]
PostHandle = Callable[[Group, int, T], T]


# =============================================================================
# Fundamental Operations
# =============================================================================


def traverse(
    group: Group,
    value: T,
    pre_handle: PreHandle,
    todo_handle: TodoHandle,
    post_handle: PostHandle,
    depth: int = 0,
) -> T:
    """Fold over a group's subtree.

    Args:
        group: Root of the subtree to visit
        value: Starting accumulator value
        pre_handle: (group, depth, acc) -> (descend, acc), before children
        todo_handle: (todo, depth, acc) -> acc, once per visible todo
        post_handle: (group, depth, acc) -> acc, after children, always
        depth: Depth of ``group``; children are visited at ``depth + 1``

    Returns:
        Final accumulated value
    """
    descend, value = pre_handle(group, depth, value)
    if descend:
        for subgroup in group.subgroups:
            value = traverse(subgroup, value, pre_handle, todo_handle, post_handle, depth + 1)
        for todo in group.todos:
            value = todo_handle(todo, depth + 1, value)
        for todo in group.completed:
            value = todo_handle(todo, depth + 1, value)
    return post_handle(group, depth, value)


def traverse_mut(
    group: Group,
    value: T,
    pre_handle: PreHandle,
    todo_handle: TodoHandle,
    post_handle: PostHandle,
    depth: int = 0,
) -> T:
    """Fold over a group's subtree, allowing visitors to edit it.

    Same contract as :func:`traverse`. Child sequences are read after
    ``pre_handle`` returns and iterated as snapshots, so a visitor may
    splice a group's lists (e.g. move completed todos into the archive)
    without disturbing the walk.
    """
    descend, value = pre_handle(group, depth, value)
    if descend:
        for subgroup in list(group.subgroups):
            value = traverse_mut(subgroup, value, pre_handle, todo_handle, post_handle, depth + 1)
        for todo in list(group.todos):
            value = todo_handle(todo, depth + 1, value)
        for todo in list(group.completed):
            value = todo_handle(todo, depth + 1, value)
    return post_handle(group, depth, value)


def traverse_forest(
    groups: Iterable[Group],
    value: T,
    pre_handle: PreHandle,
    todo_handle: TodoHandle,
    post_handle: PostHandle,
    depth: int = 0,
) -> T:
    """Run :func:`traverse` over each root group, threading one accumulator."""
    for group in groups:
        value = traverse(group, value, pre_handle, todo_handle, post_handle, depth)
    return value


# =============================================================================
# Visitor Building Blocks
# =============================================================================


def always_descend(group: Group, depth: int, value: T) -> tuple[bool, T]:
    """Pre-handle that visits the full subtree regardless of ``open``."""
    return True, value


def keep_group(group: Group, depth: int, value: T) -> T:
    return value


def keep_todo(todo: Todo, depth: int, value: T) -> T:
    return value


# =============================================================================
# High-Level Operations
# =============================================================================


def todo_count(group: Group) -> int:
    """Count active (not done) todos in the group's full subtree.

    Collapsed subgroups are counted too.
    """

    def count(todo: Todo, depth: int, total: int) -> int:
        return total if todo.is_done() else total + 1

    return traverse(group, 0, always_descend, count, keep_group)


@dataclass
class SweepState:
    """Accumulator for the archive sweep: read-only cutoff plus a tally."""

    cutoff: datetime
    archived: int = 0


def archive_sweep(group: Group, now: datetime, retention: timedelta) -> int:
    """Archive completed todos older than ``retention`` in the subtree.

    A todo is moved from ``completed`` into ``todo_archive`` when its
    ``done_time`` precedes ``now - retention``. Each ``completed`` list is
    walked in reverse index order so removals keep the remaining indices
    valid.

    Returns:
        Number of todos archived
    """

    def sweep(g: Group, depth: int, state: SweepState) -> tuple[bool, SweepState]:
        for i in reversed(range(len(g.completed))):
            done_time = g.completed[i].done_time
            if done_time is not None and done_time < state.cutoff:
                g.todo_archive.append(g.completed.pop(i))
                state.archived += 1
        return True, state

    state = traverse_mut(group, SweepState(cutoff=now - retention), sweep, keep_todo, keep_group)
    return state.archived


def clear_archives(group: Group) -> int:
    """Empty ``todo_archive`` and ``subgroup_archive`` across the subtree.

    Returns:
        Number of archived items discarded
    """

    def clear(g: Group, depth: int, dropped: int) -> tuple[bool, int]:
        dropped += len(g.todo_archive) + len(g.subgroup_archive)
        g.todo_archive = []
        g.subgroup_archive = []
        return True, dropped

    return traverse_mut(group, 0, clear, keep_todo, keep_group)
