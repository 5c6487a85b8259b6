"""Time-related utility functions."""

from datetime import datetime, timedelta, timezone
from typing import Optional

MS_PER_DAY = 24 * 60 * 60 * 1000


def days_to_ms(days: float) -> int:
    """Convert days to milliseconds."""
    return int(days * MS_PER_DAY)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure a datetime has UTC timezone.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: Datetime to check/convert

    Returns:
        Datetime with UTC timezone, or None if input is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def time_delta_ms(a: Optional[datetime], b: Optional[datetime]) -> Optional[int]:
    """Absolute difference between two timestamps in milliseconds.

    Returns:
        The absolute delta, or None when either timestamp is missing
    """
    if a is None or b is None:
        return None
    delta = ensure_utc(a) - ensure_utc(b)
    return abs(delta) // timedelta(milliseconds=1)


def within_window(a: Optional[datetime], b: Optional[datetime], tolerance_ms: int) -> bool:
    """Check whether two timestamps are at most ``tolerance_ms`` apart.

    A missing timestamp never matches.
    """
    delta = time_delta_ms(a, b)
    return delta is not None and delta <= tolerance_ms


def date_key(dt: Optional[datetime], missing: str = "NO_DATE") -> str:
    """Format a timestamp as its UTC calendar date (YYYY-MM-DD).

    Args:
        dt: Timestamp to format
        missing: Value returned when dt is None

    Returns:
        Date string like "2024-02-01"
    """
    if dt is None:
        return missing
    return ensure_utc(dt).strftime("%Y-%m-%d")
