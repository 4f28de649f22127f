"""Date manipulation utilities"""

from datetime import date, datetime


def to_naive_local(value: datetime) -> datetime:
    """Drop timezone info, converting aware datetimes to local wall-clock time first"""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def is_before_today(value: datetime, now: datetime | None = None) -> bool:
    """True when the date portion lies before today's date"""
    today = (now or datetime.now()).date()
    return to_naive_local(value).date() < today


def format_long_date(value: date) -> str:
    """Weekday, day, month and year, e.g. 'Tuesday, 20 October 2026'"""
    return f"{value:%A}, {value.day} {value:%B %Y}"


def format_time_12h(value: datetime) -> str:
    """Two-digit 12-hour clock, e.g. '09:30 AM'"""
    return value.strftime("%I:%M %p")
