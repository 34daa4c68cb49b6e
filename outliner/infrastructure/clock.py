"""The "now" source.

Local time can be unavailable (the local UTC offset cannot always be
determined). Readers of the clock get None in that case and skip whatever
comparison needed it; writers of timestamps fall back to UTC.
"""

import logging
from datetime import UTC, datetime

logger = logging.getLogger(__name__)


def now_local() -> datetime | None:
    """Current local time (timezone-aware), or None if it can't be resolved."""
    try:
        return datetime.now().astimezone()
    except (OSError, OverflowError, ValueError) as e:
        logger.warning(f"Local time unavailable: {e}")
        return None


def now_or_utc() -> datetime:
    """Current local time, falling back to UTC."""
    now = now_local()
    if now is None:
        return datetime.now(UTC)
    return now
