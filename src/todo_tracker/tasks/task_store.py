# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from .task_models import Task, TaskOutcome

logger = logging.getLogger(__name__)

TaskRow = tuple[int, str, bool]

EMPTY_LIST_MESSAGE = "The task list is empty."
LIST_HEADER = "Task list:"


class TaskStore:
    """
    Ordered in-memory task list.

    Invariant: task ids are exactly 1..N in list order. An id is the task's
    current 1-based position, not a durable key: deleting task 2 of 3 turns
    the former task 3 into task 2.

    The store owns its Task objects; iteration hands out copies.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = [replace(t) for t in tasks or ()]
        self._reassign_ids()

    # ---- low-level helpers ----

    def _reassign_ids(self) -> None:
        for index, task in enumerate(self._tasks, start=1):
            task.id = index

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return (replace(t) for t in self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self.list_tasks() == other.list_tasks()

    def __repr__(self) -> str:
        return f"TaskStore({self.list_tasks()!r})"

    def find(self, task_id: int) -> Task | None:
        index = self._index_of(task_id)
        return None if index is None else replace(self._tasks[index])

    def add(self, title: str) -> TaskOutcome:
        task_id = len(self._tasks) + 1
        self._tasks.append(Task(id=task_id, title=title, completed=False))
        logger.debug("Task added id=%s title=%r", task_id, title)
        return TaskOutcome.ADDED

    def delete(self, task_id: int) -> TaskOutcome:
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Delete: no task id=%s (total=%s)", task_id, len(self._tasks))
            return TaskOutcome.NOT_FOUND

        removed = self._tasks.pop(index)
        self._reassign_ids()
        logger.debug(
            "Task deleted id=%s title=%r; renumbered %s remaining",
            task_id,
            removed.title,
            len(self._tasks),
        )
        return TaskOutcome.DELETED

    def edit(self, task_id: int, new_title: str) -> TaskOutcome:
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Edit: no task id=%s", task_id)
            return TaskOutcome.NOT_FOUND

        self._tasks[index].title = new_title
        logger.debug("Task updated id=%s title=%r", task_id, new_title)
        return TaskOutcome.UPDATED

    def mark_completed(self, task_id: int) -> TaskOutcome:
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Complete: no task id=%s", task_id)
            return TaskOutcome.NOT_FOUND

        self._tasks[index].completed = True
        logger.debug("Task completed id=%s", task_id)
        return TaskOutcome.COMPLETED

    def list_tasks(self) -> list[TaskRow]:
        return [(t.id, t.title, t.completed) for t in self._tasks]

    def render_list(self) -> str:
        """
        Human-readable listing.

        An empty store renders as a single "empty" line, not as a header
        with zero rows.
        """
        if not self._tasks:
            return EMPTY_LIST_MESSAGE

        lines = [LIST_HEADER]
        for task_id, title, completed in self.list_tasks():
            status = "Done" if completed else "Not done"
            lines.append(f"{task_id}. {title} [{status}]")
        return "\n".join(lines)
