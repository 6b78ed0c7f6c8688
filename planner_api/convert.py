"""
Conversion between the planner dataclasses and their Pydantic wire models.

Field names match on both sides, so the conversions go through
``asdict``/``model_dump``; only nested optimizer types need spelling out.
"""
from __future__ import annotations

import typing as t
from dataclasses import asdict

from pydantic.alias_generators import to_camel

from study_planner.models import (
    EnergyLevel, ScheduleEntry, StudyBlock, StudySchedule, StudyTask, Task, TimeSlot,
)
from services.shared.models import (
    EnergyLevel as PydanticEnergyLevel,
    Schedule as PydanticSchedule,
    StudySchedule as PydanticStudySchedule,
    Task as PydanticTask,
)


def changes_to_wire(changes: dict[str, t.Any]) -> dict[str, t.Any]:
    """Rename snake_case fields of a partial update to the backend's camelCase."""
    return {("_id" if key == "id" else to_camel(key)): value for key, value in changes.items()}


def schedule_from_wire(data: dict[str, t.Any]) -> ScheduleEntry:
    return ScheduleEntry(**PydanticSchedule.model_validate(data).model_dump())


def schedule_to_model(entry: ScheduleEntry) -> PydanticSchedule:
    return PydanticSchedule(**asdict(entry))


def schedule_to_wire(entry: ScheduleEntry) -> dict[str, t.Any]:
    return schedule_to_model(entry).to_wire()


def task_from_wire(data: dict[str, t.Any]) -> Task:
    return Task(**PydanticTask.model_validate(data).model_dump())


def task_to_wire(task: Task) -> dict[str, t.Any]:
    return PydanticTask(**asdict(task)).to_wire()


def energy_level_from_wire(data: dict[str, t.Any]) -> EnergyLevel:
    return EnergyLevel(**PydanticEnergyLevel.model_validate(data).model_dump())


def energy_level_to_wire(level: EnergyLevel) -> dict[str, t.Any]:
    return PydanticEnergyLevel(**asdict(level)).to_wire()


def study_schedule_from_model(model: PydanticStudySchedule) -> StudySchedule:
    """Convert a Pydantic optimizer plan into dataclasses."""
    return StudySchedule(
        blocks=[
            StudyBlock(
                time_slot=TimeSlot(**block.time_slot.model_dump()),
                task=StudyTask(**block.task.model_dump()),
                hours_assigned=block.hours_assigned,
            )
            for block in model.blocks
        ],
        fitness=model.fitness,
    )


def study_schedule_from_wire(data: dict[str, t.Any]) -> StudySchedule:
    return study_schedule_from_model(PydanticStudySchedule.model_validate(data))
