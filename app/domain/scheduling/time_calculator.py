"""
Time parsing and slot calculations for the salon schedule.

All arithmetic is minute-of-day on naive HH:MM strings; the salon runs in a
single implicit timezone.
"""

from datetime import date, datetime, timedelta
from typing import Optional

from ...config import OPERATING_HOURS, OperatingHours
from ...models import ACTIVE_BOOKING_STATUSES

MINUTES_PER_DAY = 24 * 60


def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight"""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(total_minutes: int) -> str:
    """Format minutes since midnight as zero-padded "HH:MM" (wraps at 24:00)"""
    total_minutes %= MINUTES_PER_DAY
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def generate_slots(hours: OperatingHours = OPERATING_HOURS) -> list[str]:
    """
    Produce every bookable start time in the operating window.

    The window's close time is exclusive, so with the default 09:00-18:00
    window and 30 minute interval the result runs "09:00" ... "17:30".
    """
    return [
        minutes_to_time(minute)
        for minute in range(hours.open_minute, hours.close_minute, hours.interval_minutes)
    ]


def calculate_end_time(start_time: str, duration_minutes: int) -> str:
    """Start time plus the service duration, as HH:MM modulo 24 hours"""
    return minutes_to_time(time_to_minutes(start_time) + duration_minutes)


def crosses_midnight(start_time: str, duration_minutes: int) -> bool:
    return time_to_minutes(start_time) + duration_minutes > MINUTES_PER_DAY


def ends_after_closing(
    start_time: str, duration_minutes: int, hours: OperatingHours = OPERATING_HOURS
) -> bool:
    return time_to_minutes(start_time) + duration_minutes > hours.close_minute


def starts_before_opening(start_time: str, hours: OperatingHours = OPERATING_HOURS) -> bool:
    return time_to_minutes(start_time) < hours.open_minute


def effective_status(
    status: str, booking_date: date, end_time: str, now: Optional[datetime] = None
) -> str:
    """
    Display status for a booking.

    A pending or confirmed booking whose end has passed shows as "completed".
    The stored status is never changed by this and stays authoritative for
    cancellation rules.
    """
    if status not in ACTIVE_BOOKING_STATUSES:
        return status

    now = now or datetime.now()
    ends_at = datetime.combine(booking_date, datetime.min.time()) + timedelta(
        minutes=time_to_minutes(end_time)
    )
    # An end time that wrapped past midnight belongs to the next day
    if time_to_minutes(end_time) == 0:
        ends_at += timedelta(days=1)

    return "completed" if ends_at <= now else status
