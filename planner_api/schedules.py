"""
Schedule endpoints of the planner backend.

Covers the CRUD routes under ``/schedules`` plus submission of a recurring
schedule, which is expanded locally and created one entry at a time.
"""
from __future__ import annotations

import logging
import typing as t

from planner_api.client import request_json
from planner_api.convert import changes_to_wire, schedule_from_wire, schedule_to_wire
from study_planner.config import MAX_RANGE_DAYS
from study_planner.models import ScheduleEntry, ScheduleTemplate
from study_planner.recurring import expand_for_submission
from study_planner.times import DateLike, parse_calendar_date

logger = logging.getLogger(__name__)


def list_schedules() -> list[ScheduleEntry]:
    return [schedule_from_wire(item) for item in request_json("GET", "/schedules")]


def get_schedule(schedule_id: str) -> ScheduleEntry:
    return schedule_from_wire(request_json("GET", f"/schedules/{schedule_id}"))


def list_user_schedules(user_id: str) -> list[ScheduleEntry]:
    return [schedule_from_wire(item) for item in request_json("GET", f"/schedules/user/{user_id}")]


def list_user_schedules_in_range(user_id: str, start_date: DateLike, end_date: DateLike) -> list[ScheduleEntry]:
    """Schedules of one user between two dates, both inclusive."""
    params = {
        "startDate": parse_calendar_date(start_date).isoformat(),
        "endDate": parse_calendar_date(end_date).isoformat(),
    }
    data = request_json("GET", f"/schedules/user/{user_id}/date-range", params=params)
    return [schedule_from_wire(item) for item in data]


def list_user_schedules_except_type(user_id: str, schedule_type: str) -> list[ScheduleEntry]:
    """Schedules of one user, leaving out one type (usually ``STUDY``)."""
    data = request_json("GET", f"/schedules/user/{user_id}/except-type/{schedule_type}")
    return [schedule_from_wire(item) for item in data]


def create_schedule(user_id: str, entry: ScheduleEntry) -> ScheduleEntry:
    payload = schedule_to_wire(entry)
    payload["userId"] = user_id
    return schedule_from_wire(request_json("POST", "/schedules", json=payload))


def create_schedules_bulk(user_id: str, entries: t.Iterable[ScheduleEntry]) -> list[ScheduleEntry]:
    """Create several schedules, stopping at the first failure."""
    return [create_schedule(user_id, entry) for entry in entries]


def update_schedule(schedule_id: str, changes: dict[str, t.Any]) -> ScheduleEntry:
    """Apply a partial update given as snake_case field names."""
    data = request_json("PUT", f"/schedules/{schedule_id}", json=changes_to_wire(changes))
    return schedule_from_wire(data)


def delete_schedule(schedule_id: str) -> None:
    request_json("DELETE", f"/schedules/{schedule_id}")


def create_recurring_schedules(
    user_id: str,
    template: ScheduleTemplate,
    weekdays: t.Iterable[str],
    start_date: DateLike,
    end_date: DateLike,
    max_days: t.Optional[int] = MAX_RANGE_DAYS,
) -> list[ScheduleEntry]:
    """
    Expand a recurring schedule and create every resulting entry.

    Validation happens before anything is sent: a bad range, an unknown
    weekday or a selection that matches no date raises without creating
    any schedule.
    """
    entries = expand_for_submission(template, weekdays, start_date, end_date, max_days=max_days)
    logger.info("Creating %d recurring '%s' schedules for user %s", len(entries), template.title, user_id)
    return create_schedules_bulk(user_id, entries)
