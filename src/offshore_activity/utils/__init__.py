"""Utility functions for the Offshore Activity Classification System."""

from offshore_activity.utils.time_utils import (
    date_key,
    days_to_ms,
    ensure_utc,
    time_delta_ms,
    within_window,
)
from offshore_activity.utils.text import (
    clean_voyage_number,
    contains_any,
    has_voyage_number,
    normalize_text,
    normalize_vessel_name,
)

__all__ = [
    "date_key",
    "days_to_ms",
    "ensure_utc",
    "time_delta_ms",
    "within_window",
    "clean_voyage_number",
    "contains_any",
    "has_voyage_number",
    "normalize_text",
    "normalize_vessel_name",
]
