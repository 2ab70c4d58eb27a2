# src/todo_tracker/tasks/task_persistence.py

"""
JSON file persistence for TaskStore.

File layout (the wrapping object and field names are fixed):

    {"tasks": [{"id": 1, "title": "...", "completed": false}, ...]}

Load is all-or-nothing: any problem yields an empty store and is only logged.
Save rewrites the whole file in place and raises TaskSaveError on failure.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .task_models import Task, TaskFormatError
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskSaveError(OSError):
    """Writing the task file failed. The in-memory store is untouched."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"could not save tasks to {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def _decode_tasks(data: Any) -> list[Task]:
    if not isinstance(data, dict):
        raise TaskFormatError(f"top level must be an object, got {type(data).__name__}")
    if "tasks" not in data:
        raise TaskFormatError("missing 'tasks' field")
    raw_tasks = data["tasks"]
    if not isinstance(raw_tasks, list):
        raise TaskFormatError(f"'tasks' must be an array, got {type(raw_tasks).__name__}")
    return [Task.from_dict(item) for item in raw_tasks]


def load_task_store(path: str | Path) -> TaskStore:
    """
    Load the store from `path`.

    Never raises: a missing, unreadable or malformed file all give a fresh
    empty store. The caller cannot tell these cases apart; the log can.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        tasks = _decode_tasks(data)
    except FileNotFoundError:
        logger.info("No task file at %s; starting with an empty list.", path)
        return TaskStore()
    except (OSError, ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError, TaskFormatError
        # and the int digit limit; RecursionError is deep nesting.
        logger.warning("Could not load tasks from %s (%s); starting with an empty list.", path, e)
        return TaskStore()

    expected = list(range(1, len(tasks) + 1))
    if [t.id for t in tasks] != expected:
        logger.warning("Task ids in %s are not 1..%d; renumbering.", path, len(tasks))

    store = TaskStore(tasks)
    logger.info("Loaded %d tasks from %s", len(store), path)
    return store


def save_task_store(store: TaskStore, path: str | Path) -> None:
    """
    Write the whole store to `path`, overwriting it.

    No temp file or rename: a crash mid-write can leave a truncated file,
    which the next load treats as "no prior state".
    """
    path = Path(path)
    payload = {"tasks": [t.to_dict() for t in store]}
    try:
        # Encode before touching the file so an unencodable title leaves it intact.
        data = json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Failed to save tasks to %s: %s", path, e)
        raise TaskSaveError(path, str(e)) from e

    logger.info("Saved %d tasks to %s", len(store), path)
