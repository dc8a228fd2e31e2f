"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the engine's clock convention)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through unchanged"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def days_in_month(day: date) -> int:
    """Number of days in the calendar month containing `day`"""
    return calendar.monthrange(day.year, day.month)[1]


def days_left_in_month(day: date) -> int:
    """Days remaining after `day` in its month (0 on the last day)"""
    return days_in_month(day) - day.day


def end_of_month(day: date) -> date:
    """Last calendar day of the month containing `day`"""
    return date(day.year, day.month, days_in_month(day))
