# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

UINT32_MAX = 0xFFFFFFFF


class TaskFormatError(ValueError):
    """A persisted task record is missing a field or has the wrong type."""


class TaskOutcome(StrEnum):
    """
    Result of a store operation.

    The value is a stable code; `.message` is what the console shows.
    """

    ADDED = "added"
    DELETED = "deleted"
    UPDATED = "updated"
    COMPLETED = "completed"
    NOT_FOUND = "not_found"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES: dict[TaskOutcome, str] = {
    TaskOutcome.ADDED: "Task added!",
    TaskOutcome.DELETED: "Task deleted!",
    TaskOutcome.UPDATED: "Task updated!",
    TaskOutcome.COMPLETED: "Task marked as completed!",
    TaskOutcome.NOT_FOUND: "Task with this ID was not found.",
}


@dataclass(slots=True)
class Task:
    id: int
    title: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Strict decode of one persisted record.

        Unknown keys are ignored; missing keys or type mismatches raise
        TaskFormatError. bool is rejected for `id` even though it is an int subclass.
        """
        if not isinstance(raw, dict):
            raise TaskFormatError(f"task record must be an object, got {type(raw).__name__}")

        for key in ("id", "title", "completed"):
            if key not in raw:
                raise TaskFormatError(f"task record is missing {key!r}")

        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TaskFormatError(f"task id must be an integer, got {task_id!r}")
        if not 0 <= task_id <= UINT32_MAX:
            raise TaskFormatError(f"task id out of range: {task_id}")

        title = raw["title"]
        if not isinstance(title, str):
            raise TaskFormatError(f"task title must be a string, got {type(title).__name__}")

        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise TaskFormatError(
                f"task completed flag must be a boolean, got {type(completed).__name__}"
            )

        return cls(id=task_id, title=title, completed=completed)
