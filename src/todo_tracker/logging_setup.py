# src/todo_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menu readable:
    - allow todo_tracker logs (the handler level still applies)
    - everything else (third-party libraries, captured py.warnings) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "todo_tracker" or name.startswith("todo_tracker."):
            return True

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> Path | None:
    """
    Configure logging with:
    - Console handler on stderr: filtered, WARNING+ by default so it does not
      interleave with the menu
    - File handler: full logs for debugging (optional)

    Call this ONCE, very early. Returns the log file path, or None when file
    logging is off.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
