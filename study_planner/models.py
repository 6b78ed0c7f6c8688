# -*- coding: utf-8 -*-
"""
Data models for the study planner.

These dataclasses are what the calendar grid, the recurring expander and the
presentation helpers work with. The Pydantic equivalents used on the wire
live in ``services.shared.models``.
"""
from __future__ import annotations

import datetime as dt
import typing as t
from dataclasses import dataclass, field


@dataclass
class ScheduleEntry:
    """A dated commitment or study block on the user's calendar."""
    title: str
    date: str  # "YYYY-MM-DD", or an ISO datetime string from the backend
    start_time: str  # "HH:MM" 24h
    end_time: str  # "HH:MM" 24h
    type: str = "WORK"
    day: str = ""  # "MONDAY" etc.
    description: str = ""
    location: str = ""
    id: t.Optional[str] = None
    user_id: t.Optional[str] = None


@dataclass
class ScheduleTemplate:
    """Weekday-independent fields of a recurring schedule."""
    title: str
    start_time: str = "09:00"
    end_time: str = "17:00"
    type: str = "WORK"
    day: str = "MONDAY"  # overwritten for every generated entry
    description: str = ""
    location: str = ""


@dataclass
class DayCell:
    """One square of the month grid."""
    date: dt.date
    is_current_month: bool
    events: list[ScheduleEntry] = field(default_factory=list)


@dataclass
class Task:
    """A piece of work with a deadline that needs study time."""
    title: str
    due_date: str
    estimated_hours: float = 1.0
    priority: int = 3  # 1-5
    description: str = ""
    subject_area: str = ""
    complexity_level: str = "MEDIUM"
    completed: bool = False
    id: t.Optional[str] = None
    user_id: t.Optional[str] = None


@dataclass
class EnergyLevel:
    """How alert the user usually is for one part of one weekday."""
    day: str
    time_slot: str
    level: int  # 1-10
    date: t.Optional[str] = None
    id: t.Optional[str] = None
    user_id: t.Optional[str] = None


@dataclass
class TimeSlot:
    """A free slot the optimizer assigned study time into."""
    day: str
    date: str
    start_time: str
    end_time: str
    duration: float = 0.0  # hours
    energy_level: int = 0  # 1-10


@dataclass
class StudyTask:
    """The task summary embedded in an optimizer block."""
    title: str
    due_date: str
    estimated_hours: float = 0.0
    priority: int = 3
    complexity_level: str = "MEDIUM"
    completed: bool = False
    subject_area: str = ""
    id: t.Optional[str] = None


@dataclass
class StudyBlock:
    """Hours of one task assigned to one time slot."""
    time_slot: TimeSlot
    task: StudyTask
    hours_assigned: float


@dataclass
class StudySchedule:
    """The optimizer's finished plan."""
    blocks: list[StudyBlock] = field(default_factory=list)
    fitness: float = 0.0


@dataclass
class OptimizationParams:
    """What the optimizer needs to plan a date range for one user."""
    user_id: str
    start_date: str
    end_date: str
