# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file
in the working directory). Every variable is optional.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in log lines (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING, keeps the menu clean).",
    "TODO_LOG_DIR": "Directory for todo.log (default: .local/todo).",
    "TODO_LOG_TO_FILE": "Write the debug log file (true/false, default: true).",
    # Persistence
    "TODO_DATA_FILE": "Task list JSON file, used for both load and save (default: tasks.json).",
}
