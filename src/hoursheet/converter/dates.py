"""Calendar helpers for reading hours exports and writing timesheets.

All functions are pure and work on ``datetime.date`` values only. Weekday
and month names are English regardless of the process locale, since the
exports always use English names.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Iterator, Optional

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Full names and their three-letter forms
_MONTHS = {
    **{name.lower(): number for number, name in enumerate(MONTH_NAMES, start=1)},
    **{name[:3].lower(): number for number, name in enumerate(MONTH_NAMES, start=1)},
}
_WEEKDAYS = {name.lower() for name in WEEKDAY_NAMES} | {name[:3].lower() for name in WEEKDAY_NAMES}

# e.g. "2 January 2023"
DAY_MONTH_YEAR = re.compile(r"(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]+)\s+(?P<year>\d{4})")
# e.g. "Tuesday 2 January"
WEEKDAY_DAY_MONTH = re.compile(r"(?P<weekday>[A-Za-z]+)\s+(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]+)")
# e.g. "13:37"
HOUR_MINUTE = re.compile(r"(?P<hour>\d{1,2}):(?P<minute>\d{2})")

RANGE_SEPARATOR = " to "

EPOCH_MONDAY = date(1970, 1, 5)
DAYS_PER_PERIOD = 28


def _build_date(year: int, month_name: str, day: int) -> Optional[date]:
    month = _MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_range_start(value: str) -> Optional[date]:
    """Parse the start of a ``"<d MMMM yyyy> to <d MMMM yyyy>"`` range.

    Only the part before ``" to "`` is read; the end date is ignored.
    """
    start = value.split(RANGE_SEPARATOR, 1)[0].strip()
    match = DAY_MONTH_YEAR.fullmatch(start)
    if match is None:
        return None
    return _build_date(int(match["year"]), match["month"], int(match["day"]))


def parse_day_header(value: str, year: int) -> Optional[date]:
    """Parse a ``"<weekday> <d> <month>"`` header in the given year.

    The weekday name must be a real weekday but is not checked against the
    resulting date; the day and month decide.
    """
    match = WEEKDAY_DAY_MONTH.fullmatch(value.strip())
    if match is None or match["weekday"].lower() not in _WEEKDAYS:
        return None
    return _build_date(year, match["month"], int(match["day"]))


def is_time_of_day(value: str) -> bool:
    """True for a 24-hour ``H:MM`` / ``HH:MM`` value (``24:00`` allowed)."""
    match = HOUR_MINUTE.fullmatch(value.strip())
    if match is None:
        return False
    hour, minute = int(match["hour"]), int(match["minute"])
    if minute > 59:
        return False
    return hour < 24 or (hour == 24 and minute == 0)


def format_long_date(day: date) -> str:
    """Format as ``"Monday 2 January 2023"``."""
    return f"{WEEKDAY_NAMES[day.weekday()]} {day.day} {MONTH_NAMES[day.month - 1]} {day.year}"


def period_index(day: date) -> int:
    """Four-week block index counted from Monday 1970-01-05."""
    return (day - EPOCH_MONDAY).days // DAYS_PER_PERIOD


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def days_between(earlier: date, later: date) -> int:
    """Signed number of days from ``earlier`` to ``later``."""
    return (later - earlier).days


def days_strictly_between(earlier: date, later: date) -> Iterator[date]:
    """Yield each date after ``earlier`` and before ``later``, in order."""
    cursor = earlier + timedelta(days=1)
    while cursor < later:
        yield cursor
        cursor += timedelta(days=1)


def with_year(day: date, year: int) -> Optional[date]:
    """``day`` moved to ``year``, or None when it does not exist there (29 February)."""
    try:
        return day.replace(year=year)
    except ValueError:
        return None
