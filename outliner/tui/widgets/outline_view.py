"""Outline widget for the outliner TUI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.events import Click
from textual.geometry import Region
from textual.message import Message
from textual.widgets import Static


class RowClicked(Message):
    """Message posted when a row of the outline is clicked."""

    def __init__(self, row: int) -> None:
        super().__init__()
        self.row = row


class OutlineBody(Static):
    """The rendered rows; reports clicks by row number."""

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(RowClicked(event.y))


class OutlineView(VerticalScroll):
    """Scrollable outline that keeps the cursor row in view.

    Not focusable: arrow keys belong to the cursor, not to scrolling.
    """

    can_focus = False

    DEFAULT_CSS = """
    OutlineView {
        background: $surface;
        padding: 0 1;
    }

    OutlineView > OutlineBody {
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        yield OutlineBody(id="outline-body")

    def show(self, text: Text, cursor_row: int | None) -> None:
        """Replace the rendered rows and scroll the cursor row into view."""
        self.query_one(OutlineBody).update(text)
        if cursor_row is not None:
            self.scroll_to_region(Region(0, cursor_row, 1, 1), animate=False)
