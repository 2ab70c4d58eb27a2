# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything one console session owns.

    Built once by the bootstrap and passed by reference into every menu
    handler; there is no module-level store.
    """

    # Settings (or a test stand-in) kept on the state for handlers that need it.
    settings: Any

    task_store: TaskStore
    data_file: Path

    running: bool = True
