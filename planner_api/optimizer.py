"""
Client for the remote study-plan optimizer.

The optimizer is a black box: it receives a user and a date range and
answers with a finished plan. Planning can take minutes, hence the long
timeout.
"""
from __future__ import annotations

import logging

from planner_api.client import OPTIMIZER_TIMEOUT, request_json
from planner_api.convert import study_schedule_from_wire
from planner_api.schedules import create_schedules_bulk
from study_planner.models import OptimizationParams, ScheduleEntry, StudySchedule
from study_planner.recurring import parse_date_range
from study_planner.study_plan import study_blocks_to_schedules

logger = logging.getLogger(__name__)


def optimize_schedule(params: OptimizationParams) -> StudySchedule:
    """Request an optimized plan for ``params.user_id`` over the given range."""
    start, end = parse_date_range(params.start_date, params.end_date)
    data = request_json(
        "GET",
        f"/optimizer/schedule/{params.user_id}",
        params={"startDate": start.isoformat(), "endDate": end.isoformat()},
        timeout=OPTIMIZER_TIMEOUT,
    )
    schedule = study_schedule_from_wire(data or {})
    logger.info("Optimizer returned %d blocks (fitness %.2f)", len(schedule.blocks), schedule.fitness)
    return schedule


def save_study_plan(user_id: str, schedule: StudySchedule) -> list[ScheduleEntry]:
    """Persist every block of a plan as a STUDY schedule entry."""
    entries = study_blocks_to_schedules(schedule.blocks, user_id=user_id)
    return create_schedules_bulk(user_id, entries)
