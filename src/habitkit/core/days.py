"""Calendar-day helpers - no I/O dependencies.

A calendar day is a plain ``datetime.date``. These helpers normalize
timestamps to days and convert to and from the ``YYYY-MM-DD`` key used in
persisted data.
"""

from datetime import date, datetime, timedelta
from typing import Iterator

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def as_day(value: date | datetime | str) -> date:
    """Normalize a date, datetime or day key to a calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_day(value)


def day_key(day: date | datetime) -> str:
    """Format a day as a zero-padded ``YYYY-MM-DD`` key."""
    d = as_day(day)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_day(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key (a trailing time part is ignored)."""
    return date.fromisoformat(key.strip().split("T")[0][:10])


def add_days(day: date, n: int) -> date:
    return day + timedelta(days=n)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)."""
    return (end - start).days


def weekday_index(day: date) -> int:
    """Weekday with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def end_of_year(day: date) -> date:
    return date(day.year, 12, 31)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each day from start to end inclusive, oldest first."""
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


def iter_days_back(today: date, window: int) -> Iterator[date]:
    """Yield today-1 back to today-window, most recent first."""
    for i in range(1, window + 1):
        yield today - timedelta(days=i)
