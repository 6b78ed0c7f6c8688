"""
MCP Gateway Server - unified tool entry point for the study planner.

This server exposes the calendar grid and recurring schedule computations,
which run locally, next to the planner backend and optimizer calls, which
are routed over HTTP through ``planner_api``.
"""
from __future__ import annotations

from fastmcp import FastMCP

import planner_api.client
from planner_api import optimizer, schedules, tasks
from study_planner.calendar_grid import build_month_grid as _build_month_grid
from study_planner.calendar_grid import grid_weeks, month_label, shift_month
from study_planner.config import MAX_RANGE_DAYS
from study_planner.models import (
    DayCell, OptimizationParams, ScheduleEntry, ScheduleTemplate, StudySchedule, Task,
)
from study_planner.recurring import day_count_between, end_date_for_day_count, expand_recurring
from study_planner.times import display_time, parse_calendar_date
from study_planner.weekdays import WEEKDAYS

# Create the unified MCP server
mcp = FastMCP("StudyPlannerGateway")


def get_service_status() -> dict[str, str]:
    """Report the backend URL the gateway talks to."""
    return {
        "planner_api": planner_api.client.API_URL,
        "gateway_status": "running",
    }


def format_month_grid(reference_date: str, cells: list[DayCell]) -> str:
    """Render a month grid as a plain-text table, one row per day with events."""
    lines = []
    lines.append(f"📅 {month_label(reference_date).upper()}")
    lines.append("=" * 60)
    lines.append(" ".join(f"{day[:3].title():>7}" for day in WEEKDAYS))
    lines.append("-" * 60)
    for week in grid_weeks(cells):
        lines.append(" ".join(
            f"{cell.date.day:>6}{'*' if cell.events else ' '}" if cell.is_current_month
            else f"{'(' + str(cell.date.day) + ')':>7}"
            for cell in week
        ))
    lines.append("=" * 60)

    busy = [cell for cell in cells if cell.is_current_month and cell.events]
    if not busy:
        lines.append("No schedules this month.")
        return "\n".join(lines)

    for cell in busy:
        lines.append(cell.date.strftime("%a %b %d"))
        for event in cell.events:
            lines.append(
                f"    {display_time(event.start_time)} - {display_time(event.end_time)}  "
                f"[{event.type}] {event.title}"
            )
    return "\n".join(lines)


# Calendar tools
@mcp.tool()
def build_month_grid(reference_date: str, events: list[ScheduleEntry], offset: int = 0) -> list[DayCell]:
    """Build the 42-cell month grid for a date, optionally moved by whole months."""
    reference = shift_month(reference_date, offset) if offset else parse_calendar_date(reference_date)
    return _build_month_grid(reference, events)


@mcp.tool()
def show_month_calendar(user_id: str, reference_date: str, offset: int = 0) -> str:
    """Displays a user's schedules for one month as a formatted calendar."""
    reference = shift_month(reference_date, offset)
    cells = _build_month_grid(reference, [])
    entries = schedules.list_user_schedules_in_range(user_id, cells[0].date, cells[-1].date)
    return format_month_grid(reference.isoformat(), _build_month_grid(reference, entries))


# Recurring schedule tools
@mcp.tool()
def expand_recurring_schedule(
    template: ScheduleTemplate,
    weekdays: list[str],
    start_date: str,
    end_date: str,
) -> list[ScheduleEntry]:
    """Preview the dated schedules a recurring pattern would create."""
    return expand_recurring(template, weekdays, start_date, end_date, max_days=MAX_RANGE_DAYS)


@mcp.tool()
def recurring_day_count(start_date: str, end_date: str) -> int:
    """Number of days between two dates, counting both."""
    return day_count_between(start_date, end_date)


@mcp.tool()
def recurring_end_date(start_date: str, number_of_days: int) -> str:
    """Last date of a range of ``number_of_days`` days starting at ``start_date``."""
    return end_date_for_day_count(start_date, number_of_days).isoformat()


@mcp.tool()
def create_recurring_schedules(
    user_id: str,
    template: ScheduleTemplate,
    weekdays: list[str],
    start_date: str,
    end_date: str,
) -> list[ScheduleEntry]:
    """Creates one schedule per selected weekday between two dates."""
    return schedules.create_recurring_schedules(user_id, template, weekdays, start_date, end_date)


# Planner backend tools
@mcp.tool()
def list_schedules_in_range(user_id: str, start_date: str, end_date: str) -> list[ScheduleEntry]:
    """Lists a user's schedules between two dates."""
    return schedules.list_user_schedules_in_range(user_id, start_date, end_date)


@mcp.tool()
def list_incomplete_tasks(user_id: str) -> list[Task]:
    """Lists a user's tasks that are not completed yet."""
    return tasks.list_incomplete_tasks(user_id)


@mcp.tool()
def optimize_study_schedule(user_id: str, start_date: str, end_date: str) -> StudySchedule:
    """Requests an optimized study plan for a date range."""
    return optimizer.optimize_schedule(
        OptimizationParams(user_id=user_id, start_date=start_date, end_date=end_date)
    )


@mcp.tool()
def save_study_plan(user_id: str, plan: StudySchedule) -> list[ScheduleEntry]:
    """Saves every block of an optimized plan as a STUDY schedule."""
    return optimizer.save_study_plan(user_id, plan)


@mcp.tool()
def get_gateway_info() -> dict[str, str]:
    """
    Get information about the MCP Gateway and the backend it connects to.
    """
    return get_service_status()


if __name__ == "__main__":
    print("🌟 Starting Study Planner MCP Gateway")
    for name, value in get_service_status().items():
        print(f"  • {name}: {value}")
    mcp.run()
