"""Core utility functions for Student Registry.

This module provides date handling shared by the validators and the CLI.
"""

from __future__ import annotations

import random
from datetime import date, datetime, time, timezone
from typing import Any, Optional


def parse_datetime_like(value: Any) -> datetime:
    """Convert a timestamp-like value to a datetime.

    Accepts datetime and date objects and ISO 8601 strings, including the
    trailing "Z" form sent by browsers (e.g. "2025-12-10T23:59:59Z").

    Raises:
        ValueError: If the value is not a date, datetime or parseable string.

    Examples:
        >>> parse_datetime_like("2025-12-10T23:59:59")
        datetime.datetime(2025, 12, 10, 23, 59, 59)
        >>> parse_datetime_like(date(2025, 12, 10))
        datetime.datetime(2025, 12, 10, 0, 0)
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_date_like(value: Any) -> date:
    """Convert a date-like value (string, date or datetime) to a calendar date.

    Form submissions transmit dates as strings while API bodies may carry real
    date values; both normalize to the same ``date``.

    Raises:
        ValueError: If the value cannot be interpreted as a date.

    Examples:
        >>> parse_date_like("2025-06-01")
        datetime.date(2025, 6, 1)
        >>> parse_date_like("2025-12-15T09:00:00Z")
        datetime.date(2025, 12, 15)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return parse_datetime_like(value).date()


def as_utc(value: Any) -> datetime:
    """Convert a date or datetime to an aware UTC datetime for comparison.

    Plain dates become midnight, and naive datetimes are taken to be UTC, so
    form dates and stored timestamps compare without a TypeError.

    Examples:
        >>> as_utc(date(2025, 12, 15))
        datetime.datetime(2025, 12, 15, 0, 0, tzinfo=datetime.timezone.utc)
        >>> as_utc(parse_datetime_like("2025-12-15T11:00:00+03:00")).hour
        8
    """
    moment = parse_datetime_like(value)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def resolve_now(now: Optional[Any] = None) -> datetime:
    """Return the reference time for a validation call.

    The wall clock is read only when the caller does not supply a time.
    """
    if now is None:
        return datetime.now()
    return parse_datetime_like(now)


def calendar_age(birth_date: date, today: date) -> int:
    """Age as a plain difference of calendar years.

    Month and day are ignored, so someone born in December counts a year
    older from 1 January onwards.

    Examples:
        >>> calendar_age(date(2009, 12, 31), date(2025, 1, 1))
        16
    """
    return today.year - birth_date.year


def generate_student_number(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """Issue a student number of the form ``STU<year><4 digits>``.

    Uniqueness is not guaranteed here; the store that saves the student must
    reject or regenerate duplicates.

    Examples:
        >>> generate_student_number(datetime(2025, 3, 1), random.Random(7))[:7]
        'STU2025'
    """
    year = resolve_now(now).year
    suffix = (rng or random).randrange(10000)
    return f"STU{year}{suffix:04d}"
