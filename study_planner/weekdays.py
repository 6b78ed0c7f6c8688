# -*- coding: utf-8 -*-
"""Weekday naming shared by the calendar grid and the recurring expander."""
from __future__ import annotations

import datetime as dt
import typing as t

from study_planner.errors import InvalidWeekdayError

# Index 0 is Sunday, matching the column order of the month grid.
WEEKDAYS: tuple[str, ...] = (
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
)

WEEKDAY_INDEX: dict[str, int] = {name: idx for idx, name in enumerate(WEEKDAYS)}


def weekday_index(day: dt.date) -> int:
    """Return 0 for Sunday through 6 for Saturday."""
    # date.weekday() counts from Monday
    return (day.weekday() + 1) % 7


def weekday_name(day: dt.date) -> str:
    return WEEKDAYS[weekday_index(day)]


def normalize_weekdays(names: t.Iterable[str]) -> frozenset[str]:
    """Upper-case and de-duplicate a weekday selection.

    :param names: Weekday names such as ``"monday"`` or ``"MONDAY"``.
    :return: The selection as a frozenset of canonical names.
    :raises InvalidWeekdayError: If any name is not a weekday.
    """
    selected = set()
    for name in names:
        canonical = str(name).strip().upper()
        if canonical not in WEEKDAY_INDEX:
            raise InvalidWeekdayError(
                f"Unknown weekday '{name}'. Expected one of: {', '.join(WEEKDAYS)}"
            )
        selected.add(canonical)
    return frozenset(selected)
