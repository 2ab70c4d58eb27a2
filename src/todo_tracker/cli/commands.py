# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import UINT32_MAX
from ..tasks.task_persistence import TaskSaveError
from .bootstrap import save_task_list

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]

INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
SAVED_MESSAGE = "Task list saved. Goodbye!"


@dataclass(frozen=True, slots=True)
class MenuReply:
    text: str
    is_error: bool = False


MenuHandler = Callable[[AppState, Ask], MenuReply]


def parse_task_id(raw: str) -> int:
    """
    Parse a user-typed id as an unsigned 32-bit integer.

    Anything that does not parse (empty, negative, non-digit, too large)
    becomes 0. Ids start at 1, so 0 always takes the "not found" path.
    """
    text = raw.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text or not text.isascii() or not text.isdigit():
        return 0
    value = int(text)
    return value if value <= UINT32_MAX else 0


class MenuRegistry:
    """Numbered menu used by the console connector (1. Add task, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(self, key: str, handler: MenuHandler, label: str) -> None:
        self._handlers[key] = handler
        self._labels[key] = label

    def handle(self, state: AppState, choice: str, ask: Ask) -> MenuReply:
        """
        Dispatch a menu choice like "3".

        Unknown choices get the invalid-choice reply; state is untouched.
        """
        handler = self._handlers.get(choice.strip())
        if handler is None:
            logger.debug("Invalid menu choice %r", choice)
            return MenuReply(INVALID_CHOICE_MESSAGE)
        return handler(state, ask)

    def build_menu(self) -> str:
        lines = ["Menu:"]
        for key, label in self._labels.items():
            lines.append(f"{key}. {label}")
        return "\n".join(lines)


registry = MenuRegistry()


def cmd_add(state: AppState, ask: Ask) -> MenuReply:
    title = ask("Enter task title:")
    return MenuReply(state.task_store.add(title).message)


def cmd_delete(state: AppState, ask: Ask) -> MenuReply:
    task_id = parse_task_id(ask("Enter task ID to delete:"))
    return MenuReply(state.task_store.delete(task_id).message)


def cmd_edit(state: AppState, ask: Ask) -> MenuReply:
    # Both prompts are shown even when the id does not exist.
    task_id = parse_task_id(ask("Enter task ID to edit:"))
    new_title = ask("Enter new task title:")
    return MenuReply(state.task_store.edit(task_id, new_title).message)


def cmd_complete(state: AppState, ask: Ask) -> MenuReply:
    task_id = parse_task_id(ask("Enter task ID to mark as completed:"))
    return MenuReply(state.task_store.mark_completed(task_id).message)


def cmd_save_and_exit(state: AppState, ask: Ask) -> MenuReply:
    """
    Save once and stop the loop, whether or not the save worked.
    """
    state.running = False
    try:
        save_task_list(state)
    except TaskSaveError as e:
        return MenuReply(f"Save error: {e}", is_error=True)
    return MenuReply(SAVED_MESSAGE)


registry.register("1", cmd_add, label="Add task")
registry.register("2", cmd_delete, label="Delete task")
registry.register("3", cmd_edit, label="Edit task")
registry.register("4", cmd_complete, label="Mark task as completed")
registry.register("5", cmd_save_and_exit, label="Save and exit")
