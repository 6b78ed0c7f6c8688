"""Tests for recurring schedule expansion and day-count synchronization."""
import datetime as dt

import pytest

from study_planner.errors import EmptyWeekdaySelectionError, InvalidDateRangeError, InvalidWeekdayError
from study_planner.models import ScheduleTemplate
from study_planner.recurring import (
    day_count_between, end_date_for_day_count, expand_for_submission, expand_recurring, parse_date_range,
)
from study_planner.weekdays import WEEKDAYS, normalize_weekdays, weekday_index, weekday_name


@pytest.fixture
def template() -> ScheduleTemplate:
    return ScheduleTemplate(
        title="Barista shift",
        type="WORK",
        start_time="07:00",
        end_time="12:00",
        description="Morning shift",
        location="Campus cafe",
    )


def test_mondays_of_january_2024(template: ScheduleTemplate) -> None:
    """January 2024 has exactly five Mondays."""
    entries = expand_recurring(template, {"MONDAY"}, "2024-01-01", "2024-01-31")

    assert [e.date for e in entries] == [
        "2024-01-01", "2024-01-08", "2024-01-15", "2024-01-22", "2024-01-29",
    ]
    assert all(e.day == "MONDAY" for e in entries)


def test_template_fields_pass_through(template: ScheduleTemplate) -> None:
    """Only day and date vary; the template itself is left untouched."""
    entries = expand_recurring(template, ["TUESDAY", "THURSDAY"], "2024-01-01", "2024-01-07")

    assert [(e.date, e.day) for e in entries] == [("2024-01-02", "TUESDAY"), ("2024-01-04", "THURSDAY")]
    for entry in entries:
        assert entry.title == "Barista shift"
        assert entry.type == "WORK"
        assert (entry.start_time, entry.end_time) == ("07:00", "12:00")
        assert entry.description == "Morning shift"
        assert entry.location == "Campus cafe"
    assert template.day == "MONDAY"


def test_duplicate_and_lowercase_weekdays_are_idempotent(template: ScheduleTemplate) -> None:
    once = expand_recurring(template, ["FRIDAY"], "2024-01-01", "2024-01-31")
    repeated = expand_recurring(template, ["friday", "FRIDAY", " Friday "], "2024-01-01", "2024-01-31")

    assert repeated == once
    assert len(once) == 4


def test_empty_selection_yields_nothing(template: ScheduleTemplate) -> None:
    assert expand_recurring(template, [], "2024-01-01", "2024-12-31") == []


def test_single_day_range(template: ScheduleTemplate) -> None:
    entries = expand_recurring(template, ["WEDNESDAY"], "2024-01-03", "2024-01-03")

    assert [e.date for e in entries] == ["2024-01-03"]


def test_every_weekday_across_daylight_saving_change(template: ScheduleTemplate) -> None:
    """Dates are naive, so a DST switch neither skips nor repeats a day."""
    entries = expand_recurring(template, WEEKDAYS, "2024-03-08", "2024-03-12")

    assert [e.date for e in entries] == [
        "2024-03-08", "2024-03-09", "2024-03-10", "2024-03-11", "2024-03-12",
    ]


def test_entries_stay_inside_range(template: ScheduleTemplate) -> None:
    start, end = dt.date(2024, 2, 20), dt.date(2024, 3, 5)
    entries = expand_recurring(template, ["THURSDAY", "SATURDAY"], start, end)

    for entry in entries:
        day = dt.date.fromisoformat(entry.date)
        assert start <= day <= end
        assert weekday_name(day) in {"THURSDAY", "SATURDAY"}
    assert "2024-02-29" in [e.date for e in entries]


def test_reversed_range_fails(template: ScheduleTemplate) -> None:
    with pytest.raises(InvalidDateRangeError) as exc_info:
        expand_recurring(template, ["MONDAY"], "2024-02-01", "2024-01-01")

    assert "before start date" in str(exc_info.value)


@pytest.mark.parametrize("start, end", [("2024-13-01", "2024-12-31"), ("2024-01-01", ""), ("yesterday", "2024-01-02")])
def test_unparseable_dates_fail(template: ScheduleTemplate, start: str, end: str) -> None:
    with pytest.raises(InvalidDateRangeError):
        expand_recurring(template, ["MONDAY"], start, end)


def test_unknown_weekday_fails(template: ScheduleTemplate) -> None:
    with pytest.raises(InvalidWeekdayError):
        expand_recurring(template, ["MONDAY", "FUNDAY"], "2024-01-01", "2024-01-31")


def test_range_longer_than_limit_fails(template: ScheduleTemplate) -> None:
    expand_recurring(template, ["MONDAY"], "2024-01-01", "2024-12-30", max_days=365)

    with pytest.raises(InvalidDateRangeError):
        expand_recurring(template, ["MONDAY"], "2024-01-01", "2024-12-31", max_days=365)


def test_validation_errors_are_value_errors(template: ScheduleTemplate) -> None:
    """Callers that only catch ValueError still see validation failures."""
    with pytest.raises(ValueError):
        expand_recurring(template, ["MONDAY"], "2024-02-01", "2024-01-01")


def test_expand_for_submission_refuses_empty_result(template: ScheduleTemplate) -> None:
    with pytest.raises(EmptyWeekdaySelectionError):
        expand_for_submission(template, [], "2024-01-01", "2024-01-31")

    # Tuesday 2024-01-02 through Thursday 2024-01-04 contains no Monday
    with pytest.raises(EmptyWeekdaySelectionError):
        expand_for_submission(template, ["MONDAY"], "2024-01-02", "2024-01-04")


def test_parse_date_range_accepts_datetime_strings() -> None:
    assert parse_date_range("2024-01-01T10:00:00Z", "2024-01-02") == (dt.date(2024, 1, 1), dt.date(2024, 1, 2))


def test_day_count_counts_both_ends() -> None:
    assert day_count_between("2024-01-01", "2024-01-01") == 1
    assert day_count_between("2024-01-01", "2024-01-31") == 31
    assert day_count_between("2024-01-31", "2024-01-01") == 31


def test_end_date_for_day_count() -> None:
    assert end_date_for_day_count("2024-01-01", 1) == dt.date(2024, 1, 1)
    assert end_date_for_day_count("2024-02-20", 15) == dt.date(2024, 3, 5)
    assert end_date_for_day_count("2024-01-01", 365) == dt.date(2024, 12, 30)


@pytest.mark.parametrize("start", [dt.date(2024, 1, 1), dt.date(2024, 2, 28), dt.date(2023, 10, 29)])
@pytest.mark.parametrize("number_of_days", [1, 15, 365])
def test_day_count_round_trip(start: dt.date, number_of_days: int) -> None:
    """Deriving an end date and recounting gives back the same number of days."""
    end = end_date_for_day_count(start, number_of_days)

    assert day_count_between(start, end) == number_of_days


@pytest.mark.parametrize("number_of_days", [0, -3])
def test_end_date_needs_at_least_one_day(number_of_days: int) -> None:
    with pytest.raises(InvalidDateRangeError):
        end_date_for_day_count("2024-01-01", number_of_days)


def test_weekday_table_starts_on_sunday() -> None:
    assert WEEKDAYS[0] == "SUNDAY"
    assert WEEKDAYS[6] == "SATURDAY"
    assert weekday_index(dt.date(2024, 1, 7)) == 0
    assert weekday_index(dt.date(2024, 1, 13)) == 6
    assert weekday_name(dt.date(2024, 1, 1)) == "MONDAY"


def test_normalize_weekdays() -> None:
    assert normalize_weekdays(["monday", "MONDAY", "Sunday"]) == frozenset({"MONDAY", "SUNDAY"})
    assert normalize_weekdays([]) == frozenset()


@pytest.mark.parametrize("number_of_days", [10_000_000, 10**12])
def test_end_date_past_the_last_supported_date(number_of_days: int) -> None:
    with pytest.raises(InvalidDateRangeError):
        end_date_for_day_count("2024-01-01", number_of_days)
