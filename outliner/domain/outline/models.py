"""Outline domain models.

Pure domain models for the outline document. Uses Pydantic so the whole
document serializes to JSON without a hand-written codec.
"""

from datetime import datetime, timedelta

from pydantic import AwareDatetime, BaseModel, Field


class Todo(BaseModel):
    """A single todo item (always a leaf).

    ``done_time`` is set exactly while the todo lives in its group's
    ``completed`` list; ``created`` is fixed at creation. Timestamps must
    carry a UTC offset since they are compared with the aware local time.
    """

    name: str
    done_time: AwareDatetime | None = None
    due: AwareDatetime | None = None
    created: AwareDatetime

    def is_done(self) -> bool:
        return self.done_time is not None


class Group(BaseModel):
    """A named container of subgroups and todos.

    Visible children are shown in a fixed order: ``subgroups``, then
    ``todos``, then ``completed``. Every index path into the outline is
    read against that order. The two archive lists are never shown.
    """

    hidden: bool = False
    name: str
    open: bool = True
    todos: list[Todo] = Field(default_factory=list)
    completed: list[Todo] = Field(default_factory=list)
    todo_archive: list[Todo] = Field(default_factory=list)
    subgroups: list["Group"] = Field(default_factory=list)
    subgroup_archive: list["Group"] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the group has no visible children (archives ignored)."""
        return not self.subgroups and not self.todos and not self.completed

    def __len__(self) -> int:
        return len(self.subgroups) + len(self.todos) + len(self.completed)


class Keybindings(BaseModel):
    """Key name to command mapping, using textual key names.

    Several commands may share a key; the application dispatches to the
    first one that applies to the selected item.
    """

    add_todo: str = "a"
    add_group: str = "g"
    add_top_group: str = "n"
    toggle_group: str = "space"
    toggle_todo: str = "space"
    archive_todo: str = "d"
    hide_group: str = "x"
    edit_todo: str = "e"
    edit_group: str = "e"
    move_todo_up: str = "i"
    move_todo_down: str = "k"
    move_group_up: str = "i"
    move_group_down: str = "k"
    cursor_up: str = "up"
    cursor_down: str = "down"
    group_up: str = "pageup"
    group_down: str = "pagedown"
    hierarchy_up: str = "left_square_bracket"
    hierarchy_down: str = "right_square_bracket"
    quit: str = "q"
    quit_no_save: str = "alt+q"
    save: str = "s"
    clean: str = "alt+o"
    help: str = "h"

    def commands_for(self, key: str) -> list[str]:
        """Return every command bound to ``key``, in declaration order."""
        return [name for name, bound in self.model_dump().items() if bound == key]


class Outline(BaseModel):
    """The whole document: the forest of root groups plus its settings.

    ``archive_time`` is how long a completed todo stays visible before the
    periodic sweep moves it into its group's ``todo_archive``.
    """

    groups: list[Group] = Field(default_factory=list)
    archive_groups: list[Group] = Field(default_factory=list)
    archive_time: timedelta = timedelta(days=1)
    keybindings: Keybindings = Field(default_factory=Keybindings)

    @classmethod
    def welcome(cls, now: datetime) -> "Outline":
        """Build the document shown on first run."""
        return cls(
            groups=[
                Group(
                    name="Welcome",
                    todos=[
                        Todo(name="Welcome to todo!", created=now),
                        Todo(name="Press 'h' for help", created=now),
                    ],
                    subgroups=[
                        Group(
                            name="Subgroup",
                            todos=[Todo(name="This is a subgroup", created=now)],
                        ),
                        Group(
                            name="Another subgroup",
                            todos=[Todo(name="This is another subgroup", created=now)],
                        ),
                    ],
                )
            ]
        )
