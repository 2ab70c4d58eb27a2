# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file once), then runs
the console menu in the main thread until "Save and exit".
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (data file %s)...", settings.app_name, settings.data_file)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
