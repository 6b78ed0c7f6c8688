# -*- coding: utf-8 -*-
"""
Month grid construction for the calendar view.

The grid is always six Sunday-to-Saturday weeks (42 cells). Leading cells
hold the tail of the previous month, trailing cells the head of the next one.
"""
from __future__ import annotations

import calendar
import datetime as dt
import logging
import typing as t

from study_planner.errors import InvalidDateRangeError
from study_planner.models import DayCell, ScheduleEntry
from study_planner.times import DateLike, parse_calendar_date, sort_minutes
from study_planner.weekdays import weekday_index

logger = logging.getLogger(__name__)

WEEKS_PER_GRID = 6
GRID_SIZE = WEEKS_PER_GRID * 7


def month_bounds(reference_date: DateLike) -> tuple[dt.date, dt.date]:
    """Return the first and last date of the month containing ``reference_date``."""
    reference = parse_calendar_date(reference_date)
    first_day = reference.replace(day=1)
    days_in_month = calendar.monthrange(first_day.year, first_day.month)[1]
    return first_day, first_day.replace(day=days_in_month)


def shift_month(reference_date: DateLike, months: int) -> dt.date:
    """Move whole months from ``reference_date``.

    The result is always the 1st of the target month, so stepping from
    January 31st lands on February 1st rather than skipping to March.
    """
    reference = parse_calendar_date(reference_date)
    month_number = reference.year * 12 + (reference.month - 1) + months
    year, month_index = divmod(month_number, 12)
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise InvalidDateRangeError(
            f"Moving {months} month(s) from {reference.isoformat()} leaves the supported years"
        )
    return dt.date(year, month_index + 1, 1)


def month_label(reference_date: DateLike) -> str:
    """E.g. ``"January 2024"``."""
    reference = parse_calendar_date(reference_date)
    return f"{calendar.month_name[reference.month]} {reference.year}"


def events_on(events: t.Iterable[ScheduleEntry], day: dt.date) -> list[ScheduleEntry]:
    """Return the events whose calendar date is ``day``, in input order."""
    matches = []
    for event in events:
        try:
            event_day = parse_calendar_date(event.date)
        except ValueError:
            continue
        if event_day == day:
            matches.append(event)
    return matches


def _events_by_date(events: t.Iterable[ScheduleEntry]) -> dict[dt.date, list[ScheduleEntry]]:
    grouped: dict[dt.date, list[ScheduleEntry]] = {}
    for event in events:
        try:
            event_day = parse_calendar_date(event.date)
        except ValueError:
            logger.debug("Skipping event %r with unparseable date %r", event.title, event.date)
            continue
        grouped.setdefault(event_day, []).append(event)

    # sorted() is stable, so events starting together keep their input order
    for day, day_events in grouped.items():
        grouped[day] = sorted(day_events, key=lambda e: sort_minutes(e.start_time))
    return grouped


def build_month_grid(reference_date: DateLike, events: t.Iterable[ScheduleEntry]) -> list[DayCell]:
    """Build the 42 day cells for the month containing ``reference_date``.

    Each cell carries the events falling on its date, ordered by start time
    ascending. The cells reference the input event objects; nothing is copied.

    :param reference_date: Any date inside the month to show.
    :param events: Schedule entries to place on the grid.
    :return: 42 contiguous cells, Sunday first.
    :raises InvalidDateRangeError: If the grid would spill past ``date.min`` or
        ``date.max`` (January of year 1, December of year 9999).
    """
    first_day, last_day = month_bounds(reference_date)
    try:
        grid_start = first_day - dt.timedelta(days=weekday_index(first_day))
        days = [grid_start + dt.timedelta(days=offset) for offset in range(GRID_SIZE)]
    except OverflowError:
        raise InvalidDateRangeError(
            f"The grid for {month_label(first_day)} runs past the supported dates"
        ) from None
    grouped = _events_by_date(events)

    cells = []
    for day in days:
        cells.append(
            DayCell(
                date=day,
                is_current_month=first_day <= day <= last_day,
                events=list(grouped.get(day, [])),
            )
        )
    return cells


def grid_weeks(cells: t.Sequence[DayCell]) -> list[list[DayCell]]:
    """Split a grid into its six week rows."""
    return [list(cells[start:start + 7]) for start in range(0, len(cells), 7)]
