"""Main outliner TUI application.

The OutlineApp class owns the outline, the cursor, and the repository it
was loaded from. Keys are looked up in the outline's own keybindings, so a
single key can be bound to several commands (``space`` toggles both groups
and todos); the first command that applies to the current selection wins.
"""

import logging
from datetime import datetime
from typing import Callable

from textual.app import App, ComposeResult
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Footer, Header

from outliner.application import outline_service as service
from outliner.domain.cursor import MoveError, PositionHierarchy
from outliner.domain.outline import DUE_FORMAT, Group, Outline, Todo, parse_due
from outliner.domain.shared import Err, Ok, Result, unwrap_or
from outliner.infrastructure import OutlineRepository, now_local, now_or_utc
from outliner.interfaces.render import render_text
from outliner.tui.screens import HelpModal, PromptScreen
from outliner.tui.widgets import OutlineView, RowClicked

logger = logging.getLogger(__name__)

# Seconds between archive sweeps
SWEEP_INTERVAL = 1.0


class OutlineApp(App):
    """Outliner terminal application.

    A scrollable outline of groups and todos with a structural cursor.
    Completed todos are swept into their group's archive once they are
    older than the outline's ``archive_time``.
    """

    TITLE = "Outliner"
    SUB_TITLE = "Press h for help"

    CSS = """
    Screen {
        background: $surface;
    }

    OutlineView {
        height: 1fr;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary;
    }
    """

    def __init__(self, repository: OutlineRepository, outline: Outline) -> None:
        """Initialize the app.

        Args:
            repository: Where the outline is saved on quit or save.
            outline: The loaded outline.
        """
        super().__init__()
        self.repository = repository
        self.outline = outline
        self.cursor = PositionHierarchy()
        self.saved = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield OutlineView()
        yield Footer()

    def on_mount(self) -> None:
        service.ensure_top_group(self.outline, self.cursor)
        self.cursor.normalize(self.outline)
        self.set_interval(SWEEP_INTERVAL, self.sweep)
        self.refresh_outline()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_outline(self) -> None:
        """Redraw the outline with the cursor marker and keep it in view."""
        cursor_row = unwrap_or(self.cursor.vert_pos(self.outline), None)
        view = self.query_one(OutlineView)
        view.show(render_text(self.outline, now_local(), cursor_row), cursor_row)

    def sweep(self) -> None:
        """Periodic archive sweep."""
        if service.archive_sweep(self.outline, now_local(), self.cursor):
            self.refresh_outline()

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        commands = self.outline.keybindings.commands_for(event.key)
        if not commands:
            return
        event.stop()
        self.dispatch_commands(commands)

    def dispatch_commands(self, commands: list[str]) -> None:
        """Run the first command that applies to the current selection."""
        result: Result = Err("no command")
        for name in commands:
            handler: Callable[[], Result] = getattr(self, f"command_{name}")
            result = handler()
            if isinstance(result, Ok):
                break
        if isinstance(result, Err):
            if result.error is MoveError.NO_INDEX:
                logger.error(f"Keys {commands} failed: {result.error.message}")
            else:
                logger.debug(f"Keys {commands} did not apply: {result.error}")
        self.after_edit()

    def on_row_clicked(self, message: RowClicked) -> None:
        selected = service.select_row(self.outline, self.cursor, message.row)
        if isinstance(selected, Ok):
            service.activate_item(self.outline, self.cursor, now_or_utc())
        self.after_edit()

    def after_edit(self) -> None:
        service.ensure_top_group(self.outline, self.cursor)
        self.refresh_outline()

    # =========================================================================
    # Cursor commands
    # =========================================================================

    def command_cursor_up(self) -> Result:
        return self.cursor.cursor_up(self.outline)

    def command_cursor_down(self) -> Result:
        return self.cursor.cursor_down(self.outline)

    def command_group_up(self) -> Result:
        return self.cursor.group_up(self.outline)

    def command_group_down(self) -> Result:
        return self.cursor.group_down(self.outline)

    def command_hierarchy_up(self) -> Result:
        return self.cursor.hierarchy_up(self.outline)

    def command_hierarchy_down(self) -> Result:
        return self.cursor.hierarchy_down(self.outline)

    # =========================================================================
    # Edit commands
    # =========================================================================

    def command_toggle_group(self) -> Result:
        return service.toggle_group(self.outline, self.cursor)

    def command_toggle_todo(self) -> Result:
        return service.toggle_todo(self.outline, self.cursor, now_or_utc())

    def command_archive_todo(self) -> Result:
        return service.archive_todo(self.outline, self.cursor)

    def command_hide_group(self) -> Result:
        return service.hide_group(self.outline, self.cursor)

    def command_move_todo_up(self) -> Result:
        return service.move_todo_up(self.outline, self.cursor)

    def command_move_todo_down(self) -> Result:
        return service.move_todo_down(self.outline, self.cursor)

    def command_move_group_up(self) -> Result:
        return service.move_group_up(self.outline, self.cursor)

    def command_move_group_down(self) -> Result:
        return service.move_group_down(self.outline, self.cursor)

    def command_clean(self) -> Result:
        dropped = service.clean_archives(self.outline)
        self.notify(f"Deleted {dropped} archived items", severity="information")
        return Ok(dropped)

    # =========================================================================
    # Prompting commands
    # =========================================================================

    def _selected(self) -> Group | Todo | None:
        found = self.cursor.find_item(self.outline)
        return found.value.item if isinstance(found, Ok) else None

    def _parse_due(self, text: str) -> datetime | None:
        """Parse a due date typed into a prompt; notify and drop it if invalid."""
        parsed = parse_due(text, now_local())
        if isinstance(parsed, Err):
            self.notify(parsed.error, severity="warning")
            return None
        return parsed.value

    def command_add_todo(self) -> Result:
        if not isinstance(self._selected(), Group):
            return Err("Selected item is not a group")

        def add(values: list[str] | None) -> None:
            if not values or not values[0].strip():
                return
            due = self._parse_due(values[1])
            service.add_todo(self.outline, self.cursor, values[0].strip(), due, now_or_utc())
            self.after_edit()

        self.push_screen(PromptScreen("New todo", [("Name", ""), ("Due (YYYY-MM-DD HH:MM)", "")]), add)
        return Ok(None)

    def command_add_group(self) -> Result:
        if not isinstance(self._selected(), Group):
            return Err("Selected item is not a group")

        def add(values: list[str] | None) -> None:
            if not values or not values[0].strip():
                return
            service.add_group(self.outline, self.cursor, values[0].strip())
            self.after_edit()

        self.push_screen(PromptScreen("New subgroup", [("Name", "")]), add)
        return Ok(None)

    def command_add_top_group(self) -> Result:
        def add(values: list[str] | None) -> None:
            if not values or not values[0].strip():
                return
            service.add_top_group(self.outline, values[0].strip())
            self.after_edit()

        self.push_screen(PromptScreen("New group", [("Name", "")]), add)
        return Ok(None)

    def command_edit_todo(self) -> Result:
        todo = self._selected()
        if not isinstance(todo, Todo):
            return Err("Selected item is not a todo")
        due = todo.due.strftime(DUE_FORMAT) if todo.due is not None else ""

        def edit(values: list[str] | None) -> None:
            if values is None:
                return
            parsed = parse_due(values[1], now_local())
            if isinstance(parsed, Err):
                self.notify(parsed.error, severity="warning")
                return
            service.edit_todo(self.outline, self.cursor, values[0], parsed.value)
            self.after_edit()

        self.push_screen(
            PromptScreen("Edit todo", [("Name", todo.name), ("Due (YYYY-MM-DD HH:MM)", due)]),
            edit,
        )
        return Ok(None)

    def command_edit_group(self) -> Result:
        group = self._selected()
        if not isinstance(group, Group):
            return Err("Selected item is not a group")

        def rename(values: list[str] | None) -> None:
            if values is None:
                return
            service.rename_group(self.outline, self.cursor, values[0])
            self.after_edit()

        self.push_screen(PromptScreen("Rename group", [("Name", group.name)]), rename)
        return Ok(None)

    # =========================================================================
    # Application commands
    # =========================================================================

    def command_help(self) -> Result:
        self.push_screen(HelpModal(self.outline.keybindings))
        return Ok(None)

    def command_save(self) -> Result:
        saved = self.repository.save(self.outline)
        if isinstance(saved, Err):
            self.notify(f"Save failed: {saved.error}", severity="error")
            return saved
        self.saved = True
        self.notify(f"Saved to {self.repository.path}", severity="information")
        return Ok(None)

    def command_quit(self) -> Result:
        saved = self.repository.save(self.outline)
        if isinstance(saved, Err):
            self.notify(f"Save failed: {saved.error}", severity="error")
            return saved
        self.saved = True
        self.exit()
        return Ok(None)

    def command_quit_no_save(self) -> Result:
        logger.info("Quitting without saving")
        self.exit()
        return Ok(None)
