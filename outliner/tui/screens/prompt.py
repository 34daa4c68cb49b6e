"""Modal screens for the outliner TUI: text prompts and key help."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Input, Label

from outliner.domain.outline import Keybindings


class PromptScreen(ModalScreen[list[str] | None]):
    """Ask for one or more lines of text.

    Dismisses with the entered values in field order, or None on escape.
    Enter moves to the next field and submits from the last one.
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    DEFAULT_CSS = """
    PromptScreen {
        align: center middle;
    }

    #prompt-modal {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #prompt-title {
        text-style: bold;
        margin-bottom: 1;
    }

    PromptScreen Input {
        margin-bottom: 1;
    }
    """

    def __init__(self, title: str, fields: list[tuple[str, str]]) -> None:
        """Initialize the prompt.

        Args:
            title: Heading shown above the fields.
            fields: (label, initial value) for each input.
        """
        super().__init__()
        self.prompt_title = title
        self.fields = fields

    def compose(self) -> ComposeResult:
        with Container(id="prompt-modal"):
            yield Label(self.prompt_title, id="prompt-title")
            for index, (label, value) in enumerate(self.fields):
                yield Label(label)
                yield Input(value=value, id=f"field-{index}")

    def on_mount(self) -> None:
        self.query_one("#field-0", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        inputs = list(self.query(Input))
        position = inputs.index(event.input)
        if position + 1 < len(inputs):
            inputs[position + 1].focus()
        else:
            self.dismiss([field.value for field in inputs])

    def action_cancel(self) -> None:
        self.dismiss(None)


HELP_TEXT = {
    "cursor_up": "Previous row",
    "cursor_down": "Next row",
    "group_up": "Previous sibling",
    "group_down": "Next sibling",
    "hierarchy_up": "Select parent group",
    "hierarchy_down": "Open group and enter it",
    "toggle_group": "Collapse/expand group, or mark todo done/undone",
    "add_todo": "Add todo to group",
    "add_group": "Add subgroup",
    "add_top_group": "Add top-level group",
    "edit_todo": "Edit todo or rename group",
    "archive_todo": "Archive todo",
    "hide_group": "Archive group",
    "move_todo_up": "Move item up",
    "move_todo_down": "Move item down",
    "save": "Save",
    "clean": "Delete all archived items",
    "quit": "Save and quit",
    "quit_no_save": "Quit without saving",
}


class HelpModal(ModalScreen[None]):
    """Modal dialog listing the current keybindings."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    #help-modal {
        width: 70;
        height: auto;
        max-height: 30;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
        color: $primary;
    }

    .help-row {
        layout: horizontal;
        height: 1;
    }

    .help-key {
        width: 24;
        color: $warning;
    }
    """

    def __init__(self, keybindings: Keybindings) -> None:
        super().__init__()
        self.keybindings = keybindings

    def compose(self) -> ComposeResult:
        bound = self.keybindings.model_dump()
        with Container(id="help-modal"):
            yield Label("Outliner - Keyboard Shortcuts", id="help-title")
            for command, description in HELP_TEXT.items():
                yield Horizontal(
                    Label(f"  {bound[command]}", classes="help-key"),
                    Label(description),
                    classes="help-row",
                )
            yield Label("")
            yield Label("Press Escape to close")
