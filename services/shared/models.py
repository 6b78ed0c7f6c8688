"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the dataclass models in
``study_planner.models``. The planner backend speaks camelCase JSON with a
Mongo-style ``_id``; field names here stay snake_case and match the
dataclasses, so converting is a matter of ``Model(**asdict(obj))`` one way
and ``Dataclass(**model.model_dump())`` the other.
"""
from __future__ import annotations

import typing as t
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


ScheduleType = t.Literal["WORK", "CLASS", "STUDY"]
ComplexityLevel = t.Literal["LOW", "MEDIUM", "HIGH"]
TimeSlotName = t.Literal["MORNING", "AFTERNOON", "EVENING", "NIGHT"]


class CamelModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_wire(self) -> dict[str, t.Any]:
        """Serialize for the backend, leaving unset ids out."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Planner entities
class Schedule(CamelModel):
    """A dated commitment or study block."""
    id: t.Optional[str] = Field(default=None, alias="_id")
    title: str = ""
    date: str = ""          # "YYYY-MM-DD" or ISO datetime
    start_time: str = ""    # "HH:MM" 24h
    end_time: str = ""      # "HH:MM" 24h
    type: ScheduleType = "WORK"
    day: str = ""
    description: str = ""
    location: str = ""
    user_id: t.Optional[str] = None


class ScheduleTemplate(CamelModel):
    """Weekday-independent fields of a recurring schedule."""
    title: str
    start_time: str = "09:00"
    end_time: str = "17:00"
    type: ScheduleType = "WORK"
    day: str = "MONDAY"
    description: str = ""
    location: str = ""


class Task(CamelModel):
    """A task with a deadline."""
    id: t.Optional[str] = Field(default=None, alias="_id")
    title: str = ""
    description: str = ""
    estimated_hours: float = 1.0
    priority: int = Field(default=3, ge=1, le=5)
    due_date: str = ""
    completed: bool = False
    subject_area: str = ""
    complexity_level: ComplexityLevel = "MEDIUM"
    user_id: t.Optional[str] = None


class EnergyLevel(CamelModel):
    """Energy for one weekday and time of day."""
    id: t.Optional[str] = Field(default=None, alias="_id")
    day: str = ""
    time_slot: TimeSlotName = "MORNING"
    level: int = Field(default=5, ge=1, le=10)
    date: t.Optional[str] = None
    user_id: t.Optional[str] = None


# Optimizer models
class TimeSlot(CamelModel):
    day: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    duration: float = 0.0
    energy_level: int = 0


class StudyTask(CamelModel):
    id: t.Optional[str] = Field(default=None, alias="_id")
    title: str = ""
    estimated_hours: float = 0.0
    priority: int = 3
    due_date: str = ""
    complexity_level: ComplexityLevel = "MEDIUM"
    completed: bool = False
    subject_area: str = ""


class StudyBlock(CamelModel):
    time_slot: TimeSlot
    task: StudyTask
    hours_assigned: float


class StudySchedule(CamelModel):
    """The optimizer's finished plan."""
    blocks: list[StudyBlock] = Field(default_factory=list)
    fitness: float = 0.0


# Request/Response Models for API endpoints
class DayCell(CamelModel):
    """One square of the month grid."""
    date: str                       # "YYYY-MM-DD"
    is_current_month: bool
    events: list[Schedule] = Field(default_factory=list)


class MonthGridRequest(CamelModel):
    """Request model for building a month grid."""
    reference_date: str
    events: list[Schedule] = Field(default_factory=list)
    offset: int = 0                 # whole months to navigate from reference_date


class MonthGridResponse(CamelModel):
    """Response model for a month grid."""
    month: str                      # "YYYY-MM"
    label: str                      # "January 2024"
    cells: list[DayCell]


class ExpandRecurringRequest(CamelModel):
    """Request model for expanding a recurring schedule."""
    template: ScheduleTemplate
    weekdays: list[str] = Field(default_factory=list)
    start_date: str
    end_date: t.Optional[str] = None
    number_of_days: t.Optional[int] = None


class ExpandRecurringResponse(CamelModel):
    """Response model for an expanded recurring schedule."""
    start_date: str
    end_date: str
    number_of_days: int
    schedules: list[Schedule]


class DayCountResponse(CamelModel):
    start_date: str
    end_date: str
    number_of_days: int


class StudyPlanSchedulesRequest(CamelModel):
    """Request model for converting an optimizer plan into STUDY schedules."""
    user_id: t.Optional[str] = None
    plan: StudySchedule


class StudyPlanSchedulesResponse(CamelModel):
    schedules: list[Schedule]
    total_hours: float
