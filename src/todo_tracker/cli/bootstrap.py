# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected or loaded once),
- loads the task list from the data file,
- wires it into AppState,
- saves the task list back on exit.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_persistence import load_task_store, save_task_store

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    data_file = Path(settings.data_file)
    store = load_task_store(data_file)
    logger.debug("Initial state ready data_file=%s tasks=%d", data_file, len(store))

    return AppState(settings=settings, task_store=store, data_file=data_file)


def save_task_list(state: AppState) -> None:
    """Write the full task list. Raises TaskSaveError; never reports a failed save as done."""
    save_task_store(state.task_store, state.data_file)
