"""Indented text rendering of the outline.

Built on the traversal fold: each open group descends, each closed group
shows the number of active todos hidden inside it. Root groups are drawn
at depth 1, so every row starts with at least two spaces; the TUI draws
its cursor marker over them.
"""

from datetime import datetime
from typing import NamedTuple

from rich.text import Text

from outliner.domain.outline import (
    Group,
    Outline,
    Todo,
    describe_due,
    due_style,
    keep_group,
    todo_count,
    traverse_forest,
)

INDENT = "  "
CURSOR_MARKER = "> "


class Row(NamedTuple):
    """One rendered line and its style (None for the default style)."""

    text: str
    style: str | None = None


def count_glyph(count: int) -> str:
    """Single-character todo count: the digit, or ``+`` from 10 up."""
    return str(count) if count < 10 else "+"


def outline_rows(outline: Outline, now: datetime | None) -> list[Row]:
    """Render every visible row of the outline, top to bottom."""

    def group_row(group: Group, depth: int, rows: list[Row]) -> tuple[bool, list[Row]]:
        marker = "*" if group.open else count_glyph(todo_count(group))
        rows.append(Row(f"{INDENT * depth}[{marker}] {group.name}"))
        return group.open, rows

    def todo_row(todo: Todo, depth: int, rows: list[Row]) -> list[Row]:
        marker = "*" if todo.is_done() else " "
        line = f"{INDENT * depth}[{marker}] {todo.name}"
        if todo.due is not None:
            line += f" ({describe_due(todo.due, now)})"
        rows.append(Row(line, due_style(todo, now)))
        return rows

    return traverse_forest(outline.groups, [], group_row, todo_row, keep_group, depth=1)


def format_hierarchy(outline: Outline, now: datetime | None) -> str:
    """Plain-text rendering, one line per row."""
    return "".join(f"{row.text}\n" for row in outline_rows(outline, now))


def render_text(outline: Outline, now: datetime | None, cursor_row: int | None = None) -> Text:
    """Styled rendering for rich/textual, with an optional cursor marker."""
    text = Text()
    for index, row in enumerate(outline_rows(outline, now)):
        line = row.text
        if index == cursor_row:
            line = CURSOR_MARKER + line[len(CURSOR_MARKER):]
        if index:
            text.append("\n")
        text.append(line, style=row.style or "")
    return text
