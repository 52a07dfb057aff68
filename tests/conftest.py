# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from wonky.core.dispatcher import Dispatcher
from wonky.core.responder import Responder
from wonky.core.session import Session
from wonky.tasks.task_archive import TaskArchive
from wonky.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.create_session.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Wonky",
        log_level="INFO",
        persist=True,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
        exit_delay_seconds=0.0,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def responder() -> Responder:
    return Responder(app_name="Wonky")


@pytest.fixture()
def dispatcher(store: TaskStore, responder: Responder) -> Dispatcher:
    return Dispatcher(store, responder)


@pytest.fixture()
def archive(tmp_path: Path) -> TaskArchive:
    return TaskArchive(tmp_path / "tasks.sqlite3")


@pytest.fixture()
def exits() -> list[float]:
    """Delays passed to the session exit hook."""
    return []


@pytest.fixture()
def session(dispatcher: Dispatcher, exits: list[float]) -> Session:
    """Session without persistence; the exit hook only records its delay."""
    return Session(dispatcher, exit_delay=0.5, on_exit=exits.append)


@pytest.fixture()
def run(session: Session):
    """Process one line and return the flushed reply."""

    def _run(line: str) -> str:
        session.process_line(line)
        return session.responder.flush()

    return _run
