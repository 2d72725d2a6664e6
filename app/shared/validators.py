"""Shared validation utilities"""

import re
from datetime import date, datetime
from typing import Optional

# Zero-padded 24-hour clock, e.g. 09:30
TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")


def validate_time_string(value: Optional[str]) -> str:
    """
    Validate an HH:MM time string.

    Args:
        value: Time string such as "09:30"

    Returns:
        The stripped time string

    Raises:
        ValueError: If the value is empty or not a valid 24-hour HH:MM time
    """
    if not value or not value.strip():
        raise ValueError("Start time is required")

    value = value.strip()
    if not TIME_PATTERN.match(value):
        raise ValueError("Please enter valid time format (HH:MM)")

    return value


def parse_calendar_date(value) -> date:
    """
    Parse a calendar day from a date, datetime or ISO string.

    Accepts "2025-06-10" as well as full ISO timestamps
    ("2025-06-10T00:00:00.000Z"), keeping only the day.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not str(value).strip():
        raise ValueError("Booking date is required")

    raw = str(value).strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Invalid date: {raw}") from None
