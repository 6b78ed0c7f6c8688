# -*- coding: utf-8 -*-
"""Presentation helpers for plans returned by the optimizer."""
from __future__ import annotations

import datetime as dt
import typing as t

from study_planner.models import ScheduleEntry, StudyBlock
from study_planner.times import calculate_end_time, parse_calendar_date, sort_minutes


def block_end_time(block: StudyBlock) -> str:
    """End of a block: slot start plus the hours assigned to it."""
    return calculate_end_time(block.time_slot.start_time, block.hours_assigned)


def group_blocks_by_date(blocks: t.Iterable[StudyBlock]) -> dict[dt.date, list[StudyBlock]]:
    """Group blocks by slot date.

    Dates come out in ascending order, and the blocks of each date are
    ordered by start time.
    """
    groups: dict[dt.date, list[StudyBlock]] = {}
    for block in blocks:
        groups.setdefault(parse_calendar_date(block.time_slot.date), []).append(block)

    return {
        day: sorted(groups[day], key=lambda b: sort_minutes(b.time_slot.start_time))
        for day in sorted(groups)
    }


def total_hours(blocks: t.Iterable[StudyBlock]) -> float:
    return sum(block.hours_assigned for block in blocks)


def study_blocks_to_schedules(
        blocks: t.Iterable[StudyBlock],
        user_id: t.Optional[str] = None,
) -> list[ScheduleEntry]:
    """Turn optimizer blocks into STUDY schedule entries ready to be saved."""
    return [
        ScheduleEntry(
            title=f"{block.task.title} (Study)",
            date=block.time_slot.date,
            start_time=block.time_slot.start_time,
            end_time=block_end_time(block),
            type="STUDY",
            day=block.time_slot.day,
            description=f"Assigned study time for task: {block.task.title}",
            user_id=user_id,
        )
        for block in blocks
    ]
