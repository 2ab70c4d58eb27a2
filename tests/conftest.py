# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        data_file=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def abc_store() -> TaskStore:
    s = TaskStore()
    for title in ("A", "B", "C"):
        s.add(title)
    return s


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore(), data_file=settings.data_file)
