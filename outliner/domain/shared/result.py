"""Ok/Err values for failures the caller is expected to handle.

Cursor movement and outline edits fail in ordinary ways (a stale path, an
index past the end of a group, a key that does not apply to the selected
item). Those outcomes come back as values; the TUI simply ignores the
keypress, the CLI prints the message and exits.

Example usage:
    >>> def child(group: Group, index: int) -> Result[Group, str]:
    ...     if index >= len(group.subgroups):
    ...         return Err("no such subgroup")
    ...     return Ok(group.subgroups[index])
    ...
    >>> found = child(group, 0)
    >>> if is_ok(found):
    ...     print(found.value.name)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Outcome of an operation that went through; ``value`` is its payload."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Outcome of an operation that did not apply.

    ``error`` is a ``MoveError`` for cursor paths, a message string
    elsewhere.
    """

    error: E


# Union, since the | form fails at runtime on TypeVar-parameterized aliases
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    return isinstance(result, Err)


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """The Ok payload, or ``default`` for an Err.

    Used where a failed lookup has a natural stand-in, e.g. no cursor row
    to highlight.
    """
    if isinstance(result, Ok):
        return result.value
    return default
