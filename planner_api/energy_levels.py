"""Energy level endpoints of the planner backend."""
from __future__ import annotations

import typing as t

from planner_api.client import request_json
from planner_api.convert import changes_to_wire, energy_level_from_wire, energy_level_to_wire
from study_planner.energy import EnergyMatrix, energy_matrix_to_levels
from study_planner.models import EnergyLevel


def list_energy_levels() -> list[EnergyLevel]:
    return [energy_level_from_wire(item) for item in request_json("GET", "/energy-levels")]


def get_energy_level(level_id: str) -> EnergyLevel:
    return energy_level_from_wire(request_json("GET", f"/energy-levels/{level_id}"))


def list_user_energy_levels(user_id: str) -> list[EnergyLevel]:
    data = request_json("GET", f"/energy-levels/user/{user_id}")
    return [energy_level_from_wire(item) for item in data]


def list_user_energy_levels_for_day(user_id: str, day: str) -> list[EnergyLevel]:
    data = request_json("GET", f"/energy-levels/user/{user_id}/day/{day.upper()}")
    return [energy_level_from_wire(item) for item in data]


def create_energy_level(user_id: str, level: EnergyLevel) -> EnergyLevel:
    payload = energy_level_to_wire(level)
    payload["userId"] = user_id
    return energy_level_from_wire(request_json("POST", "/energy-levels", json=payload))


def update_energy_level(level_id: str, changes: dict[str, t.Any]) -> EnergyLevel:
    data = request_json("PUT", f"/energy-levels/{level_id}", json=changes_to_wire(changes))
    return energy_level_from_wire(data)


def delete_energy_level(level_id: str) -> None:
    request_json("DELETE", f"/energy-levels/{level_id}")


def save_energy_matrix(user_id: str, matrix: EnergyMatrix) -> list[EnergyLevel]:
    """Validate a whole weekday/time-slot matrix, then create one record per cell."""
    levels = energy_matrix_to_levels(matrix, user_id=user_id)
    return [create_energy_level(user_id, level) for level in levels]
