"""Tests for the MCP gateway tools."""
import datetime as dt

import pytest

from mcp_gateway.server import format_month_grid, mcp
from planner_api import schedules
from study_planner.calendar_grid import build_month_grid
from study_planner.models import ScheduleEntry, ScheduleTemplate


async def get_tool_fn(name: str):
    """Return the plain function behind a registered tool."""
    tools = await mcp.get_tools()
    return tools[name].fn


@pytest.mark.asyncio
async def test_gateway_registers_planner_tools() -> None:
    tools = await mcp.get_tools()

    for name in [
        "build_month_grid",
        "show_month_calendar",
        "expand_recurring_schedule",
        "recurring_day_count",
        "recurring_end_date",
        "create_recurring_schedules",
        "optimize_study_schedule",
        "save_study_plan",
        "get_gateway_info",
    ]:
        assert name in tools


@pytest.mark.asyncio
async def test_build_month_grid_tool_navigates_by_offset() -> None:
    build = await get_tool_fn("build_month_grid")

    cells = build("2024-01-31", [], offset=1)

    assert len(cells) == 42
    assert [cell.date for cell in cells if cell.is_current_month][0] == dt.date(2024, 2, 1)


@pytest.mark.asyncio
async def test_recurring_tools() -> None:
    expand = await get_tool_fn("expand_recurring_schedule")
    end_date = await get_tool_fn("recurring_end_date")
    day_count = await get_tool_fn("recurring_day_count")

    entries = expand(ScheduleTemplate(title="Shift"), ["MONDAY"], "2024-01-01", "2024-01-31")

    assert len(entries) == 5
    assert end_date("2024-01-01", 15) == "2024-01-15"
    assert day_count("2024-01-01", "2024-01-15") == 15


@pytest.mark.asyncio
async def test_show_month_calendar(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(schedules, "list_user_schedules_in_range", lambda user_id, start, end: [
        ScheduleEntry(title="Exam", date="2024-01-15", start_time="09:00", end_time="11:00", type="CLASS"),
    ])
    show = await get_tool_fn("show_month_calendar")

    text = show("u1", "2024-01-20")

    assert "JANUARY 2024" in text
    assert "9:00 AM - 11:00 AM  [CLASS] Exam" in text


def test_format_month_grid_without_events() -> None:
    text = format_month_grid("2024-02-01", build_month_grid("2024-02-01", []))

    assert "FEBRUARY 2024" in text
    assert "No schedules this month." in text


def test_format_month_grid_keeps_unparseable_times() -> None:
    event = ScheduleEntry(title="Exam", date="2024-01-15", start_time="", end_time="noon")

    text = format_month_grid("2024-01-01", build_month_grid("2024-01-01", [event]))

    assert " - noon  [WORK] Exam" in text
