"""Working-day calendar arithmetic.

Everything here is a pure function of its arguments. Dates are plain
``datetime.date`` values; anything else (aware or naive datetimes, ISO
strings) is normalised with :func:`to_date` first, so subtraction always
happens on whole calendar days in one reference timezone.

Holidays may be passed as ``Holiday`` models, dates or ``YYYY-MM-DD``
strings. A holiday that falls on a weekend is simply a weekend day.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from gantt_mcp import config

SATURDAY = 5
SUNDAY = 6


def parse_date(text: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` (or ``YYYY/MM/DD``) string.

    Raises:
        ValueError: if the text is not a valid calendar date
    """
    parts = text.strip().replace("/", "-").split("-")
    if len(parts) != 3:
        raise ValueError(f"Invalid date '{text}': expected YYYY-MM-DD")
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Invalid date '{text}': {e}") from e


def format_date(day: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def reference_tz() -> tzinfo:
    """The zone that decides which calendar day an instant falls on."""
    if config.TIMEZONE.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(config.TIMEZONE)


def to_date(value: date | datetime | str) -> date:
    """
    Normalise a date-like value to a calendar date.

    Aware datetimes are converted to the reference timezone before the time
    of day is dropped; naive datetimes are taken as already local.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(reference_tz())
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a date")


def today() -> date:
    """Today's date in the reference timezone."""
    return datetime.now(reference_tz()).date()


def month_start(day: date) -> date:
    return day.replace(day=1)


def holiday_dates(holidays: Iterable | None) -> frozenset[date]:
    """Reduce a holiday collection to a set of dates."""
    if not holidays:
        return frozenset()
    if isinstance(holidays, frozenset):
        return holidays
    return frozenset(to_date(getattr(h, "date", h)) for h in holidays)


def is_working_day(day: date | datetime | str, holidays: Iterable | None = None) -> bool:
    """False on Saturdays, Sundays and registered holidays."""
    day = to_date(day)
    if day.weekday() in (SATURDAY, SUNDAY):
        return False
    return day not in holiday_dates(holidays)


def add_calendar_days(day: date | datetime | str, n: int) -> date:
    """Shift by ``n`` calendar days (negative moves backwards)."""
    return to_date(day) + timedelta(days=n)


def days_between(a: date | datetime | str, b: date | datetime | str) -> int:
    """Signed number of calendar days from ``a`` to ``b``."""
    return (to_date(b) - to_date(a)).days


def enumerate_days(start: date | datetime | str, end: date | datetime | str) -> list[date]:
    """Inclusive list of dates from ``start`` to ``end``; empty if start > end."""
    start, end = to_date(start), to_date(end)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def effective_work_days(work_days: float | int | None) -> int:
    """Durations are whole working days, never less than one."""
    if not work_days or work_days < 1:
        return 1
    return math.ceil(work_days)


def next_working_day(day: date | datetime | str, holidays: Iterable | None = None) -> date:
    """First working day on or after ``day``."""
    hset = holiday_dates(holidays)
    current = to_date(day)
    while not is_working_day(current, hset):
        current += timedelta(days=1)
    return current


def advance_working_days(
    start: date | datetime | str,
    work_days: float | int,
    holidays: Iterable | None = None,
) -> date:
    """
    Return the last day of a span of ``work_days`` working days.

    ``start`` counts as day 1 when it is a working day; otherwise counting
    begins at the next working day. ``work_days`` is rounded up and clamped
    to at least 1, so the result is always a working day.

    Example:
        Monday 2024-12-30 plus 3 working days with 2025-01-01 as a holiday
        ends on Thursday 2025-01-02.
    """
    hset = holiday_dates(holidays)
    remaining = effective_work_days(work_days)

    current = next_working_day(start, hset)
    count = 1
    while count < remaining:
        current += timedelta(days=1)
        if is_working_day(current, hset):
            count += 1
    return current


def count_working_days(
    start: date | datetime | str,
    end: date | datetime | str,
    holidays: Iterable | None = None,
) -> int:
    """Number of working days in the inclusive range; 0 if start > end."""
    hset = holiday_dates(holidays)
    return sum(1 for d in enumerate_days(start, end) if is_working_day(d, hset))
