"""Utility functions for date operations."""

import logging
import re
from datetime import date, datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-jira-progress")

ISO_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# English month names, independent of the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a Jira timestamp into a datetime.

    Accepts epoch milliseconds (int or all-digit string) and anything
    ``dateutil`` understands, such as ``2024-01-01T10:00:00.000+0000``.

    Args:
        date_str: Date string

    Returns:
        Parsed datetime, or None if date_str is None / empty string
    """
    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def format_timestamp(value: str | None) -> str | None:
    """Normalize a Jira timestamp to ISO 8601, keeping unparseable input as-is."""
    if not value:
        return value
    try:
        parsed = parse_date(value)
    except (ValueError, OverflowError):
        logger.debug(f"Could not parse timestamp '{value}', returning it unchanged")
        return value
    return parsed.isoformat() if parsed else value


def format_progress_date(day: date | None = None) -> str:
    """Format a day the way the progress template labels weeks.

    Example: ``December 1, 2025`` (full month name, unpadded day).
    """
    day = day or date.today()
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def is_iso_day(value: str | None) -> bool:
    """Check that a value is a ``YYYY-MM-DD`` calendar day."""
    if not value or not ISO_DAY_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
