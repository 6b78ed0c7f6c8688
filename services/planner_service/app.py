"""
FastAPI service for study planner computations.

This service exposes the calendar grid, recurring schedule expansion and
study-plan conversion as REST API endpoints. These are fast, pure operations
that never touch the planner backend, so the service keeps no state.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query

from planner_api.convert import schedule_to_model, study_schedule_from_model
from services.shared.models import (
    DayCell as PydanticDayCell,
    DayCountResponse,
    ExpandRecurringRequest,
    ExpandRecurringResponse,
    MonthGridRequest,
    MonthGridResponse,
    StudyPlanSchedulesRequest,
    StudyPlanSchedulesResponse,
)
from study_planner.calendar_grid import build_month_grid, month_label, shift_month
from study_planner.config import MAX_RANGE_DAYS
from study_planner.errors import InvalidDateRangeError, PlannerError
from study_planner.models import ScheduleEntry, ScheduleTemplate
from study_planner.recurring import (
    day_count_between, end_date_for_day_count, expand_recurring, parse_date_range,
)
from study_planner.study_plan import study_blocks_to_schedules, total_hours
from study_planner.times import parse_calendar_date


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup and cleanup on shutdown."""
    # No special initialization needed for the planner service
    yield


app = FastAPI(
    title="Study Planner Service",
    description="REST API for month grids, recurring schedules and study plans",
    version="1.0.0",
    lifespan=lifespan,
)


def _unprocessable(e: Exception) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "study-planner-service"}


@app.post("/calendar/month", response_model=MonthGridResponse)
async def calendar_month(request: MonthGridRequest) -> MonthGridResponse:
    """
    Build the 6x7 month grid for a reference date.

    ``offset`` navigates whole months from the reference date; the events of
    every cell are ordered by start time.
    """
    events = [ScheduleEntry(**event.model_dump()) for event in request.events]
    try:
        reference = parse_calendar_date(request.reference_date)
        if request.offset:
            reference = shift_month(reference, request.offset)
        cells = build_month_grid(reference, events)
    except (PlannerError, ValueError, OverflowError) as e:
        raise _unprocessable(e)
    return MonthGridResponse(
        month=f"{reference.year:04d}-{reference.month:02d}",
        label=month_label(reference),
        cells=[
            PydanticDayCell(
                date=cell.date.isoformat(),
                is_current_month=cell.is_current_month,
                events=[schedule_to_model(event) for event in cell.events],
            )
            for cell in cells
        ],
    )


@app.post("/schedules/recurring:expand", response_model=ExpandRecurringResponse)
async def expand_recurring_schedule(request: ExpandRecurringRequest) -> ExpandRecurringResponse:
    """
    Preview the schedules a recurring pattern would create.

    The range ends either at ``endDate`` or after ``numberOfDays`` days.
    Nothing is persisted; an empty ``schedules`` list means nothing would be
    created.
    """
    try:
        if request.end_date:
            end_date = request.end_date
        elif request.number_of_days is not None:
            if request.number_of_days > MAX_RANGE_DAYS:
                raise InvalidDateRangeError(
                    f"Date range spans {request.number_of_days} days; the limit is {MAX_RANGE_DAYS}"
                )
            end_date = end_date_for_day_count(request.start_date, request.number_of_days)
        else:
            raise InvalidDateRangeError("Provide either endDate or numberOfDays")

        start, end = parse_date_range(request.start_date, end_date)
        template = ScheduleTemplate(**request.template.model_dump())
        entries = expand_recurring(template, request.weekdays, start, end, max_days=MAX_RANGE_DAYS)
    except (PlannerError, ValueError) as e:
        raise _unprocessable(e)

    return ExpandRecurringResponse(
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        number_of_days=day_count_between(start, end),
        schedules=[schedule_to_model(entry) for entry in entries],
    )


@app.get("/schedules/day-count", response_model=DayCountResponse)
async def schedule_day_count(
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
) -> DayCountResponse:
    """Number of days covered by a range, counting both ends."""
    try:
        start, end = parse_date_range(start_date, end_date)
    except PlannerError as e:
        raise _unprocessable(e)
    return DayCountResponse(
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        number_of_days=day_count_between(start, end),
    )


@app.get("/schedules/end-date", response_model=DayCountResponse)
async def schedule_end_date(
    start_date: str = Query(alias="startDate"),
    number_of_days: int = Query(alias="numberOfDays"),
) -> DayCountResponse:
    """Last date of a range starting at ``startDate`` spanning ``numberOfDays``."""
    try:
        start = parse_calendar_date(start_date)
        end = end_date_for_day_count(start, number_of_days)
    except (PlannerError, ValueError) as e:
        raise _unprocessable(e)
    return DayCountResponse(
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        number_of_days=number_of_days,
    )


@app.post("/study-plan/schedules", response_model=StudyPlanSchedulesResponse)
async def study_plan_schedules(request: StudyPlanSchedulesRequest) -> StudyPlanSchedulesResponse:
    """
    Convert an optimizer plan into the STUDY schedules that saving it creates.
    """
    plan = study_schedule_from_model(request.plan)
    try:
        entries = study_blocks_to_schedules(plan.blocks, user_id=request.user_id)
    except ValueError as e:
        raise _unprocessable(e)
    return StudyPlanSchedulesResponse(
        schedules=[schedule_to_model(entry) for entry in entries],
        total_hours=total_hours(plan.blocks),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8004)
