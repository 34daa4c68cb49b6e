"""Widgets for the outliner TUI."""

from outliner.tui.widgets.outline_view import OutlineBody, OutlineView, RowClicked

__all__ = ["OutlineBody", "OutlineView", "RowClicked"]
