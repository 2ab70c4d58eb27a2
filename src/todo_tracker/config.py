# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every setting has a default, so a bare `todo-tracker` run needs no setup.
- The data file defaults to `tasks.json` in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_DATA_FILE = "tasks.json"
DEFAULT_LOG_DIR = ".local/todo"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Persistence ----
    data_file: Path

    @staticmethod
    def from_env() -> "Settings":
        # .env is looked up from the working directory, where tasks.json lives too.
        load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "todo").strip() or "todo",
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(_k("LOG_DIR"), Path(DEFAULT_LOG_DIR)),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_file=_env_path(_k("DATA_FILE"), Path(DEFAULT_DATA_FILE)),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
