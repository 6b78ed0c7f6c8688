"""Task endpoints of the planner backend."""
from __future__ import annotations

import typing as t

from planner_api.client import request_json
from planner_api.convert import changes_to_wire, task_from_wire, task_to_wire
from study_planner.models import Task


def list_tasks() -> list[Task]:
    return [task_from_wire(item) for item in request_json("GET", "/tasks")]


def get_task(task_id: str) -> Task:
    return task_from_wire(request_json("GET", f"/tasks/{task_id}"))


def list_user_tasks(user_id: str) -> list[Task]:
    return [task_from_wire(item) for item in request_json("GET", f"/tasks/user/{user_id}")]


def list_incomplete_tasks(user_id: str) -> list[Task]:
    return [task_from_wire(item) for item in request_json("GET", f"/tasks/user/{user_id}/incomplete")]


def list_upcoming_tasks(user_id: str, days_ahead: int = 7) -> list[Task]:
    """Tasks due within ``days_ahead`` days."""
    data = request_json("GET", f"/tasks/user/{user_id}/upcoming", params={"daysAhead": days_ahead})
    return [task_from_wire(item) for item in data]


def create_task(user_id: str, task: Task) -> Task:
    """Create a task; new tasks always start out incomplete."""
    payload = task_to_wire(task)
    payload["completed"] = False
    payload["userId"] = user_id
    return task_from_wire(request_json("POST", "/tasks", json=payload))


def update_task(task_id: str, changes: dict[str, t.Any]) -> Task:
    return task_from_wire(request_json("PUT", f"/tasks/{task_id}", json=changes_to_wire(changes)))


def mark_task_complete(task_id: str) -> Task:
    return update_task(task_id, {"completed": True})


def delete_task(task_id: str) -> None:
    request_json("DELETE", f"/tasks/{task_id}")
