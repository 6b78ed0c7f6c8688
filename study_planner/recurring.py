# -*- coding: utf-8 -*-
"""
Recurring schedule expansion.

A recurring schedule is one template repeated on selected weekdays across a
date range. Expansion turns it into the concrete dated entries that get
created on the backend, one per matching day.
"""
from __future__ import annotations

import datetime as dt
import typing as t

from study_planner.errors import EmptyWeekdaySelectionError, InvalidDateRangeError
from study_planner.models import ScheduleEntry, ScheduleTemplate
from study_planner.times import DateLike, parse_calendar_date
from study_planner.weekdays import normalize_weekdays, weekday_name


def parse_date_range(start_date: DateLike, end_date: DateLike) -> tuple[dt.date, dt.date]:
    """Parse and validate an inclusive date range.

    :raises InvalidDateRangeError: If either date is invalid or end precedes start.
    """
    try:
        start = parse_calendar_date(start_date)
        end = parse_calendar_date(end_date)
    except ValueError as e:
        raise InvalidDateRangeError(str(e)) from e

    if end < start:
        raise InvalidDateRangeError(
            f"End date {end.isoformat()} is before start date {start.isoformat()}"
        )
    return start, end


def day_count_between(start_date: DateLike, end_date: DateLike) -> int:
    """Number of calendar days from start to end, counting both ends.

    The distance is taken as an absolute value, so a reversed pair still
    yields a count; range validation is the expander's job.
    """
    try:
        start = parse_calendar_date(start_date)
        end = parse_calendar_date(end_date)
    except ValueError as e:
        raise InvalidDateRangeError(str(e)) from e
    return abs((end - start).days) + 1


def end_date_for_day_count(start_date: DateLike, number_of_days: int) -> dt.date:
    """Last date of a range that starts on ``start_date`` and spans ``number_of_days``."""
    if number_of_days < 1:
        raise InvalidDateRangeError(f"Number of days must be at least 1, got {number_of_days}")
    try:
        start = parse_calendar_date(start_date)
    except ValueError as e:
        raise InvalidDateRangeError(str(e)) from e
    try:
        return start + dt.timedelta(days=number_of_days - 1)
    except OverflowError:
        raise InvalidDateRangeError(
            f"{number_of_days} days from {start.isoformat()} is past the last supported date"
        ) from None


def expand_recurring(
        template: ScheduleTemplate,
        selected_weekdays: t.Iterable[str],
        start_date: DateLike,
        end_date: DateLike,
        max_days: t.Optional[int] = None,
) -> list[ScheduleEntry]:
    """Expand a template into one entry per selected weekday in the range.

    :param template: Fields shared by every generated entry.
    :param selected_weekdays: Weekday names; duplicates and case are ignored.
    :param start_date: First date of the range, inclusive.
    :param end_date: Last date of the range, inclusive.
    :param max_days: Optional upper bound on the range length.
    :return: Entries in ascending date order; empty when no weekday is selected.
    :raises InvalidDateRangeError: For unparseable, reversed or overlong ranges.
    :raises InvalidWeekdayError: For unknown weekday names.
    """
    start, end = parse_date_range(start_date, end_date)
    if max_days is not None and day_count_between(start, end) > max_days:
        raise InvalidDateRangeError(
            f"Date range spans {day_count_between(start, end)} days; the limit is {max_days}"
        )

    selected = normalize_weekdays(selected_weekdays)
    if not selected:
        return []

    entries = []
    day = start
    while day <= end:
        name = weekday_name(day)
        if name in selected:
            entries.append(
                ScheduleEntry(
                    title=template.title,
                    date=day.isoformat(),
                    start_time=template.start_time,
                    end_time=template.end_time,
                    type=template.type,
                    day=name,
                    description=template.description,
                    location=template.location,
                )
            )
        day += dt.timedelta(days=1)
    return entries


def expand_for_submission(
        template: ScheduleTemplate,
        selected_weekdays: t.Iterable[str],
        start_date: DateLike,
        end_date: DateLike,
        max_days: t.Optional[int] = None,
) -> list[ScheduleEntry]:
    """Like :func:`expand_recurring`, but refuses a result that creates nothing."""
    entries = expand_recurring(template, selected_weekdays, start_date, end_date, max_days=max_days)
    if not entries:
        raise EmptyWeekdaySelectionError(
            "No schedules would be created: select at least one weekday that occurs in the date range"
        )
    return entries
