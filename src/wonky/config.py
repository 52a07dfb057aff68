# src/wonky/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Components receive settings explicitly; get_settings() is only read at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "WONKY"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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

    # ---- Persistence ----
    persist: bool
    data_dir: Path
    tasks_db_path: Path

    # ---- Session ----
    # GUI only: seconds the farewell stays visible. The console returns right away.
    exit_delay_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Wonky").strip() or "Wonky"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        persist = _env_bool(_k("PERSIST"), True)
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/wonky"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        exit_delay_seconds = max(0.0, _env_float(_k("EXIT_DELAY_SECONDS"), 1.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            persist=persist,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            exit_delay_seconds=exit_delay_seconds,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
