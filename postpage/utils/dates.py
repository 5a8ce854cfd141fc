"""
Date formatting helpers for post pages.
Output matches the en-US long form, e.g. "March 5, 2024".
"""
from __future__ import annotations

from datetime import datetime, timezone

# Fixed English names; the process locale must not change page output
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def to_utc(value: datetime) -> datetime:
    """Return value in UTC. Naive datetimes (as SQLite returns them) are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_long_date(value: datetime) -> str:
    """
    Format a timestamp as "<Month> <day>, <year>".

    Args:
        value: Creation timestamp of a post

    Returns:
        Long-form date string in UTC, day without zero padding
    """
    value = to_utc(value)
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"
