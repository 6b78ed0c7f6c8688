# -*- coding: utf-8 -*-
"""Weekday by time-of-day energy matrix."""
from __future__ import annotations

import typing as t

from study_planner.models import EnergyLevel
from study_planner.weekdays import WEEKDAYS

TIME_SLOTS: tuple[str, ...] = ("MORNING", "AFTERNOON", "EVENING", "NIGHT")
DEFAULT_ENERGY_LEVEL = 5
MIN_ENERGY_LEVEL = 1
MAX_ENERGY_LEVEL = 10

EnergyMatrix = dict[str, dict[str, int]]


def build_energy_matrix(levels: t.Iterable[EnergyLevel]) -> EnergyMatrix:
    """Fill every weekday and time slot, defaulting to 5.

    Recorded levels override the default; records naming an unknown day or
    slot are ignored, and a later record wins over an earlier one.
    """
    matrix = {day: {slot: DEFAULT_ENERGY_LEVEL for slot in TIME_SLOTS} for day in WEEKDAYS}
    for level in levels:
        day = level.day.upper()
        slot = level.time_slot.upper()
        if day in matrix and slot in matrix[day]:
            matrix[day][slot] = level.level
    return matrix


def energy_matrix_to_levels(matrix: EnergyMatrix, user_id: t.Optional[str] = None) -> list[EnergyLevel]:
    """Flatten a matrix back into records, validating each level.

    :raises ValueError: If a level lies outside 1-10.
    """
    levels = []
    for day, slots in matrix.items():
        for slot, value in slots.items():
            if not MIN_ENERGY_LEVEL <= value <= MAX_ENERGY_LEVEL:
                raise ValueError(
                    f"Energy level for {day} {slot} must be between "
                    f"{MIN_ENERGY_LEVEL} and {MAX_ENERGY_LEVEL}, got {value}"
                )
            levels.append(EnergyLevel(day=day, time_slot=slot, level=value, user_id=user_id))
    return levels
