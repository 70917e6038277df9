#!/usr/bin/env python3
"""
filters.py
----------
Custom Jinja2 filters for blog templates.

Filters:
    - month_name: Short month name used in the post listing ("Jan.", "Sept.")
    - rfc3339: Timestamp formatted for Atom feeds
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone

MONTH_NAMES = {
    1: "Jan.",
    2: "Feb.",
    3: "Mar.",
    4: "Apr.",
    5: "May",
    6: "June",
    7: "July",
    8: "Aug.",
    9: "Sept.",
    10: "Oct.",
    11: "Nov.",
    12: "Dec.",
}


def month_name(month: int) -> str:
    """
    Short display name of a month number.

    Examples:
        >>> month_name(9)
        'Sept.'
        >>> month_name(13)
        'Error!'
    """
    return MONTH_NAMES.get(month, "Error!")


def rfc3339(value: datetime) -> str:
    """
    Format a timestamp as RFC 3339 in UTC.

    Naive datetimes are taken to be UTC.

    Examples:
        >>> rfc3339(datetime(2024, 1, 15, 0, 0, 2, tzinfo=timezone.utc))
        '2024-01-15T00:00:02+00:00'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="seconds")
