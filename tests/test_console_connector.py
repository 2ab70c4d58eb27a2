# tests/test_console_connector.py

from __future__ import annotations

import json

from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.cli.commands import MenuRegistry, MenuReply
from todo_tracker.connectors.console_connector import (
    INTERNAL_ERROR_MESSAGE,
    NOT_SAVED_MESSAGE,
    run_console_loop,
)

from .fakes import FakeConsole


def _run(state, console: FakeConsole, **kwargs) -> None:
    run_console_loop(
        state,
        read=console.read,
        write=console.write,
        write_err=console.write_err,
        **kwargs,
    )


def test_session_adds_and_saves(settings) -> None:
    state = create_initial_state(settings=settings)
    console = FakeConsole(["1", "Write report", "4", "1", "5"])

    _run(state, console)

    assert console.out[0] == "The task list is empty."
    assert "1. Write report [Done]" in console.text
    assert console.out[-1] == "Task list saved. Goodbye!"
    assert console.err == []
    assert json.loads(settings.data_file.read_text("utf-8")) == {
        "tasks": [{"id": 1, "title": "Write report", "completed": True}]
    }

    # Next session starts from the saved file.
    assert create_initial_state(settings=settings).task_store.list_tasks() == [
        (1, "Write report", True)
    ]


def test_invalid_choice_keeps_looping(state) -> None:
    console = FakeConsole(["9", "", "add", "5"])

    _run(state, console)

    assert console.out.count("Invalid choice. Please try again.") == 3
    assert console.out[-1] == "Task list saved. Goodbye!"


def test_prompts_are_shown(state) -> None:
    console = FakeConsole(["3", "1", "renamed", "5"])

    _run(state, console)

    assert console.prompts[:3] == [
        "Choose an option: ",
        "Enter task ID to edit: ",
        "Enter new task title: ",
    ]
    assert "Task with this ID was not found." in console.out


def test_eof_exits_without_saving(state) -> None:
    console = FakeConsole(["1", "draft"])

    _run(state, console)

    assert console.out[-1] == NOT_SAVED_MESSAGE
    assert state.task_store.list_tasks() == [(1, "draft", False)]
    assert not state.data_file.exists()


def test_save_failure_goes_to_error_writer(state, tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", "utf-8")
    state.data_file = blocker / "tasks.json"
    console = FakeConsole(["5"])

    _run(state, console)

    assert len(console.err) == 1
    assert console.err[0].startswith("Save error: ")
    assert "Task list saved. Goodbye!" not in console.out


def test_crashing_handler_is_reported_and_loop_continues(state) -> None:
    menu = MenuRegistry()

    def boom(state, ask):
        raise RuntimeError("boom")

    def stop(state, ask):
        state.running = False
        return MenuReply("stopped")

    menu.register("1", boom, label="Boom")
    menu.register("2", stop, label="Stop")
    console = FakeConsole(["1", "2"])

    _run(state, console, menu=menu)

    assert console.err == [INTERNAL_ERROR_MESSAGE]
    assert console.out[-1] == "stopped"


def test_ctrl_c_exits_without_saving(state) -> None:
    console = FakeConsole(["1", "draft"])

    def read(prompt: str) -> str:
        if prompt == "Choose an option: " and console.prompts:
            raise KeyboardInterrupt
        return console.read(prompt)

    run_console_loop(state, read=read, write=console.write, write_err=console.write_err)

    assert console.out[-1] == NOT_SAVED_MESSAGE
    assert state.task_store.list_tasks() == [(1, "draft", False)]
    assert not state.data_file.exists()
