"""Index-path cursor over an outline.

The cursor is a list of indices. ``indexes[0]`` picks a root group, each
following index except the last picks one of the current group's
``subgroups``, and the last index is read against the group's visible
child order (subgroups, then todos, then completed). A one-element path
selects a root group itself.

The cursor never holds references into the tree, so any structural edit
can leave it stale. Edits that remove or relocate the selected item must
call :meth:`PositionHierarchy.clamp_after_removal`; bulk edits the cursor
cannot follow call :meth:`PositionHierarchy.normalize`.
"""

from dataclasses import dataclass, field
from enum import Enum

from outliner.domain.outline.models import Group, Outline, Todo
from outliner.domain.outline.traversal import keep_group, traverse
from outliner.domain.shared.result import Err, Ok, Result

# Fallback terminal size (columns, lines) when the real size is unknown
DEFAULT_TERMINAL_SIZE = (20, 10)


class MoveError(str, Enum):
    """Why a path could not be resolved."""

    NO_INDEX = "no-index"
    GROUP_NOT_FOUND = "group-not-found"
    OUT_OF_BOUNDS = "out-of-bounds"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    MoveError.NO_INDEX: "No index items. This should not happen.",
    MoveError.GROUP_NOT_FOUND: "The specified group doesn't exist.",
    MoveError.OUT_OF_BOUNDS: "The specified item doesn't exist.",
}


@dataclass(frozen=True)
class HierarchyItem:
    """A resolved path: the selected group or todo and its depth."""

    item: Group | Todo
    depth: int


@dataclass(frozen=True)
class HierarchySlot:
    """A resolved path with enough context to edit the selection in place.

    Attributes:
        item: The selected group or todo.
        depth: ``len(path) - 1``.
        container: The list that holds ``item`` (``outline.groups``, or one
            of the parent's ``subgroups``/``todos``/``completed``).
        offset: Position of ``item`` inside ``container``.
        parent: The group the final index is relative to, or None for a
            root group.
    """

    item: Group | Todo
    depth: int
    container: list
    offset: int
    parent: Group | None


def rendered_rows(group: Group) -> int:
    """Number of visual rows a group occupies.

    A closed group is its header row only; an open group adds every row
    rendered beneath it.
    """

    def header(g: Group, depth: int, rows: int) -> tuple[bool, int]:
        return g.open, rows + 1

    def item(todo: Todo, depth: int, rows: int) -> int:
        return rows + 1

    return traverse(group, 0, header, item, keep_group)


@dataclass
class PositionHierarchy:
    """The cursor: a structural path into the outline.

    Every operation returns ``Ok`` or ``Err(MoveError)`` and leaves the
    path unchanged on failure.
    """

    indexes: list[int] = field(default_factory=lambda: [0])

    # -------------------- path access --------------------

    def last(self) -> Result[int, MoveError]:
        if not self.indexes:
            return Err(MoveError.NO_INDEX)
        return Ok(self.indexes[-1])

    def set_last(self, value: int) -> Result[None, MoveError]:
        if not self.indexes:
            return Err(MoveError.NO_INDEX)
        self.indexes[-1] = value
        return Ok(None)

    def reset(self) -> None:
        """Select the first root group."""
        self.indexes = [0]

    # -------------------- resolution --------------------

    @staticmethod
    def _parent_of(outline: Outline, path: list[int]) -> Result[Group, MoveError]:
        """Resolve every index but the last (the root group for length 1)."""
        if not path:
            return Err(MoveError.NO_INDEX)
        if not 0 <= path[0] < len(outline.groups):
            return Err(MoveError.GROUP_NOT_FOUND)
        group = outline.groups[path[0]]
        for index in path[1:-1]:
            if not 0 <= index < len(group.subgroups):
                return Err(MoveError.GROUP_NOT_FOUND)
            group = group.subgroups[index]
        return Ok(group)

    @staticmethod
    def _resolve(outline: Outline, path: list[int]) -> Result[HierarchySlot, MoveError]:
        if not path:
            return Err(MoveError.NO_INDEX)
        depth = len(path) - 1

        if len(path) == 1:
            if not 0 <= path[0] < len(outline.groups):
                return Err(MoveError.GROUP_NOT_FOUND)
            return Ok(HierarchySlot(
                item=outline.groups[path[0]],
                depth=depth,
                container=outline.groups,
                offset=path[0],
                parent=None,
            ))

        parent = PositionHierarchy._parent_of(outline, path)
        if isinstance(parent, Err):
            return parent
        group = parent.value

        index = path[-1]
        subgroups, todos = len(group.subgroups), len(group.todos)
        if index < 0 or index >= len(group):
            return Err(MoveError.OUT_OF_BOUNDS)
        if index < subgroups:
            container, offset = group.subgroups, index
        elif index < subgroups + todos:
            container, offset = group.todos, index - subgroups
        else:
            container, offset = group.completed, index - subgroups - todos

        return Ok(HierarchySlot(
            item=container[offset],
            depth=depth,
            container=container,
            offset=offset,
            parent=group,
        ))

    def find_item(self, outline: Outline) -> Result[HierarchyItem, MoveError]:
        """Resolve the path to the selected group or todo."""
        slot = self._resolve(outline, self.indexes)
        if isinstance(slot, Err):
            return slot
        return Ok(HierarchyItem(item=slot.value.item, depth=slot.value.depth))

    def find_item_mut(self, outline: Outline) -> Result[HierarchySlot, MoveError]:
        """Resolve the path like :meth:`find_item`, keeping its container.

        The returned slot lets callers replace or splice the selected item.
        """
        return self._resolve(outline, self.indexes)

    def find_group(self, outline: Outline) -> Result[Group, MoveError]:
        """Find the group the final index is relative to."""
        return self._parent_of(outline, self.indexes)

    def find_group_mut(self, outline: Outline) -> Result[Group, MoveError]:
        """Find the group the final index is relative to, for splicing.

        At the root level this is the selected root group itself; callers
        that reorder or remove root groups edit ``outline.groups`` instead.
        """
        return self._parent_of(outline, self.indexes)

    def _level_size(self, outline: Outline, path: list[int]) -> Result[int, MoveError]:
        """Number of siblings at the path's last level."""
        if len(path) == 1:
            return Ok(len(outline.groups))
        parent = self._parent_of(outline, path)
        if isinstance(parent, Err):
            return parent
        return Ok(len(parent.value))

    def _selected_open_group(self, outline: Outline, path: list[int]) -> Result[Group | None, MoveError]:
        """The group at ``path`` if it is open and has visible children."""
        slot = self._resolve(outline, path)
        if isinstance(slot, Err):
            return slot
        item = slot.value.item
        if isinstance(item, Group) and item.open and not item.is_empty():
            return Ok(item)
        return Ok(None)

    # -------------------- visual movement --------------------

    def cursor_up(self, outline: Outline) -> Result[None, MoveError]:
        """Move to the previous visible row.

        Steps to the previous sibling and, while that lands on an open
        non-empty group, on to its last child, since that is the row drawn
        directly above. At a level's first child, moves to the parent.
        """
        path = list(self.indexes)
        if not path:
            return Err(MoveError.NO_INDEX)
        check = self._resolve(outline, path)
        if isinstance(check, Err):
            return check

        if path[-1] > 0:
            path[-1] -= 1
            while True:
                opened = self._selected_open_group(outline, path)
                if isinstance(opened, Err):
                    return opened
                if opened.value is None:
                    break
                path.append(len(opened.value) - 1)
        elif len(path) > 1:
            path.pop()

        self.indexes = path
        return Ok(None)

    def cursor_down(self, outline: Outline) -> Result[None, MoveError]:
        """Move to the next visible row.

        Enters an open non-empty group; otherwise advances to the next
        sibling, climbing out of every level that is exhausted. Stays put
        on the last row of the forest.
        """
        path = list(self.indexes)
        opened = self._selected_open_group(outline, path)
        if isinstance(opened, Err):
            return opened
        if opened.value is not None:
            self.indexes = path + [0]
            return Ok(None)

        while True:
            size = self._level_size(outline, path)
            if isinstance(size, Err):
                return size
            if path[-1] + 1 < size.value:
                path[-1] += 1
                self.indexes = path
                return Ok(None)
            if len(path) == 1:
                return Ok(None)
            path.pop()

    # -------------------- structural movement --------------------

    def group_up(self, outline: Outline) -> Result[None, MoveError]:
        """Step to the previous sibling; no-op at the first one."""
        last = self.last()
        if isinstance(last, Err):
            return last
        if last.value > 0:
            self.indexes[-1] -= 1
        return Ok(None)

    def group_down(self, outline: Outline) -> Result[None, MoveError]:
        """Step to the next sibling; no-op at the last one."""
        last = self.last()
        if isinstance(last, Err):
            return last
        size = self._level_size(outline, self.indexes)
        if isinstance(size, Err):
            return size
        if last.value < size.value - 1:
            self.indexes[-1] += 1
        return Ok(None)

    def hierarchy_up(self, outline: Outline | None = None) -> Result[None, MoveError]:
        """Select the parent group; no-op at the root level."""
        if not self.indexes:
            return Err(MoveError.NO_INDEX)
        if len(self.indexes) > 1:
            self.indexes.pop()
        return Ok(None)

    def hierarchy_down(self, outline: Outline) -> Result[None, MoveError]:
        """Open the selected group and select its first child.

        No-op on todos and empty groups.
        """
        found = self.find_item(outline)
        if isinstance(found, Err):
            return found
        item = found.value.item
        if isinstance(item, Group) and not item.is_empty():
            item.open = True
            self.indexes.append(0)
        return Ok(None)

    # -------------------- visual position --------------------

    def vert_pos(self, outline: Outline) -> Result[int, MoveError]:
        """Row of the selection when the forest is drawn as a list.

        Row 0 is the first root group's header. Each preceding sibling adds
        its rendered rows and each ancestor adds its header row.
        """
        check = self._resolve(outline, self.indexes)
        if isinstance(check, Err):
            return check

        first = self.indexes[0]
        total = sum(rendered_rows(g) for g in outline.groups[:first])
        current = outline.groups[first]

        for index in self.indexes[1:]:
            total += 1  # header of the group we are inside
            if index < len(current.subgroups):
                total += sum(rendered_rows(g) for g in current.subgroups[:index])
                current = current.subgroups[index]
            else:
                total += sum(rendered_rows(g) for g in current.subgroups)
                total += index - len(current.subgroups)

        return Ok(total)

    def vert_offset(self, outline: Outline, height: int | None = None) -> Result[int, MoveError]:
        """Scroll offset for the viewport: ``(row // 4) * height``.

        ``height`` None means the terminal size is unknown; the fallback
        height is used.
        """
        row = self.vert_pos(outline)
        if isinstance(row, Err):
            return row
        if height is None:
            height = DEFAULT_TERMINAL_SIZE[1]
        return Ok((row.value // 4) * height)

    def vert_pos_offset(self, outline: Outline, height: int | None = None) -> Result[int, MoveError]:
        """Row of the selection relative to :meth:`vert_offset`."""
        row = self.vert_pos(outline)
        if isinstance(row, Err):
            return row
        offset = self.vert_offset(outline, height)
        if isinstance(offset, Err):
            return offset
        return Ok(row.value - offset.value)

    # -------------------- re-addressing --------------------

    def clamp_after_removal(self, outline: Outline) -> Result[None, MoveError]:
        """Re-establish a valid path after the selected item was removed.

        Moves to the previous sibling when the final index fell off the
        end, or up to the parent when the level is now empty. An empty
        forest leaves the path at ``[0]`` for the caller to repair.
        """
        last = self.last()
        if isinstance(last, Err):
            return last
        size = self._level_size(outline, self.indexes)
        if isinstance(size, Err):
            return size

        if size.value == 0:
            if len(self.indexes) > 1:
                self.indexes.pop()
            else:
                self.indexes = [0]
        elif last.value >= size.value:
            self.indexes[-1] = size.value - 1
        return Ok(None)

    def normalize(self, outline: Outline) -> None:
        """Clamp a possibly stale path to the nearest valid selection.

        The path is cut at the first level that no longer resolves and the
        final index is clamped into its group.
        """
        if not self.indexes or not outline.groups:
            self.indexes = [0]
            return

        path = [min(max(self.indexes[0], 0), len(outline.groups) - 1)]
        group = outline.groups[path[0]]
        rest = self.indexes[1:]

        for position, index in enumerate(rest):
            is_last = position == len(rest) - 1
            if not is_last and 0 <= index < len(group.subgroups):
                path.append(index)
                group = group.subgroups[index]
                continue
            if len(group) > 0:
                path.append(min(max(index, 0), len(group) - 1))
            break

        self.indexes = path
