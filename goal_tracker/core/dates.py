# goal_tracker/core/dates.py
"""
Calendar-date helpers.

Every date crossing the API is a canonical ``YYYY-MM-DD`` string and means a
calendar day, never an instant. Day-of-week comes from the naive calendar
date; the noon-UTC ``instant`` only exists for timestamp-based storage.
"""
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, NamedTuple, Union

# ASCII digits only; \d would also accept other scripts
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"

class ParsedDate(NamedTuple):
    day: date
    instant: datetime      # 12:00 UTC on `day`
    day_of_week: int       # 0 = Sunday .. 6 = Saturday
    day_of_month: int

def parse_date_string(date_str: str) -> ParsedDate:
    """Raises ValueError for anything that is not a real YYYY-MM-DD date."""
    if not re.fullmatch(DATE_PATTERN, date_str):
        raise ValueError(f"Invalid date string: {date_str!r}")
    year, month, day = (int(p) for p in date_str.split("-"))

    calendar_day = date(year, month, day)
    return ParsedDate(
        day=calendar_day,
        instant=datetime.combine(calendar_day, time(12, 0), tzinfo=timezone.utc),
        day_of_week=day_of_week(calendar_day),
        day_of_month=day,
    )

def day_of_week(value: date) -> int:
    # isoweekday: Monday=1 .. Sunday=7
    return value.isoweekday() % 7

def format_date_string(value: Union[date, datetime]) -> str:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"

def date_range(start: date, end: date) -> Iterator[date]:
    """Inclusive on both ends."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)

def utc_today() -> date:
    return datetime.now(timezone.utc).date()
