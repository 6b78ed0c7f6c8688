"""Tests for month grid construction and month navigation."""
import calendar
import datetime as dt

import pytest

from study_planner.calendar_grid import (
    GRID_SIZE, build_month_grid, events_on, grid_weeks, month_bounds, month_label, shift_month,
)
from study_planner.errors import InvalidDateRangeError
from study_planner.models import ScheduleEntry


def make_event(date: str, start_time: str = "09:00", title: str = "Event") -> ScheduleEntry:
    """Create a schedule entry with sensible defaults."""
    return ScheduleEntry(title=title, date=date, start_time=start_time, end_time="10:00")


def all_months(first_year: int, last_year: int) -> list[dt.date]:
    return [dt.date(year, month, 1) for year in range(first_year, last_year + 1) for month in range(1, 13)]


@pytest.mark.parametrize("reference", all_months(2023, 2026))
def test_grid_has_six_contiguous_weeks_from_sunday_to_saturday(reference: dt.date) -> None:
    """Every month produces 42 consecutive days starting on a Sunday."""
    cells = build_month_grid(reference, [])

    assert len(cells) == GRID_SIZE
    # date.weekday(): Monday is 0, Sunday is 6
    assert cells[0].date.weekday() == 6
    assert cells[-1].date.weekday() == 5
    for previous, current in zip(cells, cells[1:]):
        assert current.date - previous.date == dt.timedelta(days=1)


@pytest.mark.parametrize("reference", all_months(2023, 2026))
def test_current_month_cells_match_days_in_month(reference: dt.date) -> None:
    """The cells flagged as current month are exactly the days of that month."""
    cells = build_month_grid(reference, [])
    current = [cell.date for cell in cells if cell.is_current_month]

    assert len(current) == calendar.monthrange(reference.year, reference.month)[1]
    assert all(day.month == reference.month for day in current)
    assert all(cell.date.month != reference.month for cell in cells if not cell.is_current_month)


def test_january_2024_overflows_into_neighbouring_months() -> None:
    """January 1st 2024 is a Monday, so the grid starts on December 31st."""
    cells = build_month_grid(dt.date(2024, 1, 17), [])

    assert cells[0].date == dt.date(2023, 12, 31)
    assert not cells[0].is_current_month
    assert cells[1].date == dt.date(2024, 1, 1)
    assert cells[1].is_current_month
    assert cells[-1].date == dt.date(2024, 2, 10)
    assert not cells[-1].is_current_month


def test_month_starting_on_sunday_has_no_leading_days() -> None:
    """September 1st 2024 is a Sunday."""
    cells = build_month_grid("2024-09-01", [])

    assert cells[0].date == dt.date(2024, 9, 1)
    assert cells[0].is_current_month


def test_february_of_leap_year() -> None:
    cells = build_month_grid("2024-02-10", [])

    assert sum(cell.is_current_month for cell in cells) == 29


def test_every_event_lands_in_exactly_one_matching_cell() -> None:
    """Events are placed by calendar date, including overflow days."""
    events = [
        make_event("2024-01-01", title="New year"),
        make_event("2024-01-15T23:30:00-05:00", title="Late class"),
        make_event("2024-01-15T00:00:00.000Z", title="Midnight"),
        make_event("2023-12-31", title="Overflow before"),
        make_event("2024-02-09", title="Overflow after"),
        make_event("2024-06-01", title="Outside grid"),
    ]
    cells = build_month_grid(dt.date(2024, 1, 1), events)

    for event in events[:5]:
        holders = [cell for cell in cells if any(e is event for e in cell.events)]
        assert len(holders) == 1
        assert holders[0].date.isoformat() == event.date[:10]

    assert not any(events[5] in cell.events for cell in cells)


def test_time_of_day_and_offset_do_not_shift_the_date() -> None:
    """A late-evening timestamp with a negative offset stays on its own date."""
    event = make_event("2024-03-10T23:59:00-08:00")
    cells = build_month_grid("2024-03-01", [event])

    (cell,) = [cell for cell in cells if cell.events]
    assert cell.date == dt.date(2024, 3, 10)


def test_events_in_a_cell_are_sorted_by_start_time() -> None:
    """Events are ordered by start time; equal start times keep input order."""
    events = [
        make_event("2024-01-10", "14:00", "Afternoon"),
        make_event("2024-01-10", "08:30", "Early A"),
        make_event("2024-01-10", "08:30", "Early B"),
        make_event("2024-01-10", "10:00", "Morning"),
    ]
    cells = build_month_grid("2024-01-10", events)
    cell = next(cell for cell in cells if cell.date == dt.date(2024, 1, 10))

    assert [e.title for e in cell.events] == ["Early A", "Early B", "Morning", "Afternoon"]


def test_events_with_unparseable_dates_are_skipped() -> None:
    events = [make_event("not a date"), make_event("2024-01-05")]
    cells = build_month_grid("2024-01-01", events)

    assert sum(len(cell.events) for cell in cells) == 1


def test_build_is_repeatable() -> None:
    """Building twice from the same inputs gives equal grids."""
    events = [make_event("2024-01-05"), make_event("2024-01-06")]

    assert build_month_grid("2024-01-20", events) == build_month_grid("2024-01-03", events)


def test_events_on_keeps_input_order() -> None:
    events = [make_event("2024-01-05", "15:00", "B"), make_event("2024-01-05", "09:00", "A")]

    assert [e.title for e in events_on(events, dt.date(2024, 1, 5))] == ["B", "A"]


def test_grid_weeks_splits_into_rows() -> None:
    weeks = grid_weeks(build_month_grid("2024-01-01", []))

    assert len(weeks) == 6
    assert all(len(week) == 7 for week in weeks)


def test_month_bounds() -> None:
    assert month_bounds("2023-02-14") == (dt.date(2023, 2, 1), dt.date(2023, 2, 28))
    assert month_bounds(dt.datetime(2024, 12, 31, 23, 0)) == (dt.date(2024, 12, 1), dt.date(2024, 12, 31))


def test_shift_month_normalizes_to_first_day() -> None:
    """Moving from the 31st never skips a short month."""
    assert shift_month(dt.date(2024, 1, 31), 1) == dt.date(2024, 2, 1)
    assert shift_month(dt.date(2024, 3, 31), -1) == dt.date(2024, 2, 1)
    assert shift_month(dt.date(2024, 12, 15), 1) == dt.date(2025, 1, 1)
    assert shift_month(dt.date(2024, 1, 15), -1) == dt.date(2023, 12, 1)


@pytest.mark.parametrize("reference", [dt.date(2024, 1, 31), dt.date(2023, 8, 15), dt.date(2020, 2, 29)])
def test_twelve_months_forward_and_back_returns_to_same_grid(reference: dt.date) -> None:
    """Navigating one step at a time forward then back lands on the original month."""
    current = reference
    for _ in range(12):
        current = shift_month(current, 1)
    assert (current.year, current.month) == (reference.year + 1, reference.month)
    for _ in range(12):
        current = shift_month(current, -1)

    assert build_month_grid(current, []) == build_month_grid(reference, [])


def test_month_label() -> None:
    assert month_label("2024-01-09") == "January 2024"
    assert month_label(dt.date(1999, 12, 1)) == "December 1999"


@pytest.mark.parametrize("reference", [dt.date(1, 1, 1), dt.date(9999, 12, 1)])
def test_grid_past_the_supported_dates_is_a_range_error(reference: dt.date) -> None:
    """The first and last months would need days before date.min or after date.max."""
    with pytest.raises(InvalidDateRangeError):
        build_month_grid(reference, [])


def test_grid_next_to_the_supported_dates() -> None:
    assert build_month_grid(dt.date(1, 2, 1), [])[0].date == dt.date(1, 1, 28)
    assert build_month_grid(dt.date(9999, 11, 1), [])[-1].date == dt.date(9999, 12, 11)


def test_shift_month_outside_supported_years() -> None:
    with pytest.raises(InvalidDateRangeError):
        shift_month(dt.date(2024, 1, 1), 1000000)
    with pytest.raises(InvalidDateRangeError):
        shift_month(dt.date(1, 1, 1), -1)
