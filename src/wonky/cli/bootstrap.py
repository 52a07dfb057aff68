# src/wonky/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- picks the run mode from argv,
- ensures local (gitignored) directories exist,
- wires store, responder, dispatcher, archive and session together,
- replays the archived task list before the first prompt.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import StrEnum

from ..config import Settings, get_settings
from ..core.dispatcher import Dispatcher
from ..core.responder import Responder
from ..core.session import ExitHook, Session
from ..tasks.task_archive import TaskArchive
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


class RunMode(StrEnum):
    NORMAL = "normal"
    TEST = "test"
    GUI = "gui"


def check_mode(args: Sequence[str]) -> RunMode:
    """First CLI argument selects the mode; missing or unknown -> NORMAL."""
    if not args:
        return RunMode.NORMAL
    try:
        return RunMode(args[0].strip().lower())
    except ValueError:
        logger.warning("Unknown mode %r, falling back to %s.", args[0], RunMode.NORMAL.value)
        return RunMode.NORMAL


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_session(
    *,
    settings: Settings | None = None,
    mode: RunMode = RunMode.NORMAL,
    on_exit: ExitHook | None = None,
) -> Session:
    """
    Build a ready-to-use Session from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    In TEST mode (or with persistence disabled) nothing is read from or written to disk.
    May raise StorageError when the archive cannot be opened or read.
    """
    if settings is None:
        settings = get_settings()

    archive: TaskArchive | None = None
    if settings.persist and mode is not RunMode.TEST:
        _ensure_local_dirs(settings)
        archive = TaskArchive(settings.tasks_db_path)

    responder = Responder(app_name=settings.app_name)
    dispatcher = Dispatcher(TaskStore(), responder)
    session = Session(
        dispatcher,
        archive=archive,
        exit_delay=settings.exit_delay_seconds,
        on_exit=on_exit,
    )

    session.load_archive()
    responder.greet()
    return session
