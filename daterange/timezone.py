"""Timezone utility functions.

Central helpers for instant handling:
- Treat naive datetimes as UTC
- Convert to UTC for ordering comparisons

Aware datetimes sharing one tzinfo object compare by wall-clock time and
ignore fold, so ordering checks always go through to_utc.
"""

from datetime import datetime, timezone

from loguru import logger


def to_aware(dt: datetime) -> datetime:
    """Return a timezone-aware datetime.

    Args:
        dt: Datetime (timezone-aware or naive)

    Returns:
        The same datetime if aware, otherwise the naive value interpreted as UTC
    """
    if dt.tzinfo is None:
        logger.debug(f"Interpreting naive datetime {dt.isoformat()} as UTC")
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC.

    Args:
        dt: Datetime (timezone-aware or naive)

    Returns:
        Datetime in UTC timezone
    """
    return to_aware(dt).astimezone(timezone.utc)
