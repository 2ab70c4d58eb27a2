# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

INTERNAL_ERROR_MESSAGE = "Internal error while handling the choice."
NOT_SAVED_MESSAGE = "Input closed. Exiting without saving."


def _print_err(text: str) -> None:
    print(text, file=sys.stderr)


def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = print,
    write_err: Writer = _print_err,
    menu: MenuRegistry = menu_registry,
) -> None:
    """
    Blocking menu loop: show the list, show the menu, read a choice, dispatch.

    Ends only through the save-and-exit choice, or when input runs out
    (EOF / Ctrl+C), in which case nothing is saved.
    """
    logger.info("Console connector started (tasks=%d).", len(state.task_store))

    def ask(prompt: str) -> str:
        return read(f"{prompt} ").strip()

    while state.running:
        write(state.task_store.render_list())
        write("\n" + menu.build_menu())

        try:
            choice = ask("Choose an option:")
            reply = menu.handle(state, choice, ask)
        except EOFError:
            logger.info("Console EOF received, exiting without saving.")
            write(NOT_SAVED_MESSAGE)
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting without saving.")
            write("")
            write(NOT_SAVED_MESSAGE)
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            write_err(INTERNAL_ERROR_MESSAGE)
            continue

        if reply.is_error:
            write_err(reply.text)
        else:
            write(reply.text)

    logger.info("Console connector finished.")
