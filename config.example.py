# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "WONKY_APP_NAME": "Bot display name (default: Wonky).",
    "WONKY_LOG_LEVEL": "Console logging level (default: INFO).",
    # Persistence
    "WONKY_PERSIST": "Save the task list between runs (true/false, default: true).",
    "WONKY_DATA_DIR": "Local data directory (default: .local/wonky).",
    "WONKY_TASKS_DB_PATH": "Task archive SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Session
    "WONKY_EXIT_DELAY_SECONDS": "Seconds the GUI keeps the farewell visible (default: 1.0).",
}
