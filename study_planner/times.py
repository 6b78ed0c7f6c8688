# -*- coding: utf-8 -*-
"""
Calendar-date and wall-clock helpers.

Every date in the planner is a naive ``datetime.date``. Strings coming from
the backend may carry a time-of-day or a UTC offset (``2024-01-05T00:00:00Z``);
only the calendar part is kept and nothing is ever converted between zones.
"""
from __future__ import annotations

import datetime as dt
import typing as t

MINUTES_PER_DAY = 24 * 60

DateLike = t.Union[dt.date, str]


def parse_calendar_date(value: DateLike) -> dt.date:
    """Parse a date, ISO date string or ISO datetime string into a date.

    :param value: A ``date``/``datetime`` or a string starting with ``YYYY-MM-DD``.
    :return: The calendar date.
    :raises ValueError: If the value is not a recognizable date.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a date or ISO date string, got {type(value).__name__}")

    text = value.strip()
    try:
        return dt.date.fromisoformat(text[:10])
    except ValueError:
        raise ValueError(f"Invalid date: '{value}'") from None


def time_to_minutes(time_string: str) -> int:
    """Convert ``HH:MM`` (24h) to minutes after midnight.

    :raises ValueError: If the string is not a valid wall-clock time.
    """
    try:
        hours_text, minutes_text = time_string.strip().split(":")[:2]
        hours, minutes = int(hours_text), int(minutes_text)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time: '{time_string}'") from None
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid time: '{time_string}'")
    return hours * 60 + minutes


def calculate_end_time(start_time: str, duration_hours: float) -> str:
    """Add a duration in hours to ``HH:MM``, wrapping past midnight.

    Partial minutes are dropped, e.g. ``calculate_end_time("09:00", 1.5)``
    is ``"10:30"`` and ``calculate_end_time("23:30", 1)`` is ``"00:30"``.
    """
    total_minutes = time_to_minutes(start_time) + duration_hours * 60
    new_hours = int(total_minutes // 60) % 24
    new_minutes = int(total_minutes % 60)
    return f"{new_hours:02d}:{new_minutes:02d}"


def format_time(time_string: str) -> str:
    """Format ``HH:MM`` as a 12-hour clock string such as ``1:05 PM``."""
    minutes_after_midnight = time_to_minutes(time_string)
    hours, minutes = divmod(minutes_after_midnight, 60)
    period = "PM" if hours >= 12 else "AM"
    display_hours = 12 if hours % 12 == 0 else hours % 12
    return f"{display_hours}:{minutes:02d} {period}"


def sort_minutes(time_string: str) -> int:
    """Sort key for start times; unparseable times sort after the whole day."""
    try:
        return time_to_minutes(time_string)
    except ValueError:
        return MINUTES_PER_DAY


def display_time(time_string: str) -> str:
    """Like :func:`format_time`, but shows an unparseable time as it was given."""
    try:
        return format_time(time_string)
    except ValueError:
        return time_string
