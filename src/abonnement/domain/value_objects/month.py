"""
Calendar month helpers.

Subscriptions are tracked at month granularity. The external
representation is "MM-YYYY"; internally a month is the date of its
first day.
"""

import re
from datetime import date

MONTH_FORMAT = "MM-YYYY"

_MONTH_PATTERN = re.compile(r"^([0-9]{2})-([0-9]{4})$")


def parse_month(value: str) -> date:
    """
    Parse "MM-YYYY" into the first day of that month.

    Args:
        value: Month string, e.g. "07-2025"

    Returns:
        date for the first day of the month

    Raises:
        ValueError: If value is not a valid "MM-YYYY" month
    """
    match = _MONTH_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"expected {MONTH_FORMAT}, got {value!r}")

    month, year = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 01 and 12, got {match.group(1)}")
    if year < 1:
        raise ValueError(f"year must be positive, got {match.group(2)}")

    return date(year, month, 1)


def format_month(value: date) -> str:
    """Format a date as "MM-YYYY"."""
    return f"{value.month:02d}-{value.year:04d}"
