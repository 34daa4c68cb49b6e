"""Due-date helpers for todos.

All functions take ``now`` explicitly. ``now`` is None when the local time
could not be determined; comparisons are then skipped and dates are shown
in absolute form instead.
"""

from datetime import datetime, timedelta

from outliner.domain.shared.result import Err, Ok, Result

from .models import Todo

DUE_FORMAT = "%Y-%m-%d %H:%M"
DUE_SOON = timedelta(hours=24)

_UNITS = (
    (365 * 24 * 3600, "year"),
    (30 * 24 * 3600, "month"),
    (7 * 24 * 3600, "week"),
    (24 * 3600, "day"),
    (3600, "hour"),
    (60, "minute"),
)


def parse_due(text: str, now: datetime | None) -> Result[datetime | None, str]:
    """Parse a due date typed by the user.

    Accepts ``YYYY-MM-DD HH:MM`` or ``YYYY-MM-DD`` (which keeps the current
    hour and minute). Blank input means no due date. The result carries
    ``now``'s timezone.

    Returns:
        Ok(datetime), Ok(None) for blank input, or Err(str).
    """
    text = text.strip()
    if not text:
        return Ok(None)
    if now is None:
        return Err("Local time is unavailable; due date not set")

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return Err(f"Not a date: {text!r} (expected YYYY-MM-DD [HH:MM])")

    if len(text) == 10:
        parsed = parsed.replace(hour=now.hour, minute=now.minute)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=now.tzinfo)
    return Ok(parsed.replace(second=0, microsecond=0))


def humanize_delta(delta: timedelta) -> str:
    """Describe a signed duration: ``in 3 hours`` or ``2 days ago``."""
    seconds = int(delta.total_seconds())
    magnitude = abs(seconds)

    phrase = "a moment"
    for size, unit in _UNITS:
        if magnitude >= size:
            count = magnitude // size
            phrase = f"{count} {unit}" if count == 1 else f"{count} {unit}s"
            break

    if phrase == "a moment":
        return "now"
    return f"in {phrase}" if seconds > 0 else f"{phrase} ago"


def describe_due(due: datetime, now: datetime | None) -> str:
    """Relative description of a due date, or the date itself without ``now``."""
    if now is None:
        return due.strftime(DUE_FORMAT)
    return humanize_delta(due - now)


def due_style(todo: Todo, now: datetime | None) -> str | None:
    """Colour for a todo row.

    ``dim`` when done, ``red`` when overdue, ``yellow`` when due within a
    day, otherwise None (also when ``now`` is unknown).
    """
    if todo.is_done():
        return "dim"
    if todo.due is None or now is None:
        return None
    if now > todo.due:
        return "red"
    if todo.due - now < DUE_SOON:
        return "yellow"
    return None
