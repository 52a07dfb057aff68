# src/wonky/tasks/task_archive.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from ..errors import StorageError
from .task_models import TaskKind, TaskRecord
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskArchive:
    """
    SQLite snapshot of the task list.

    One row per task, ordered by position. Loading does not build records
    directly: it yields command lines that the session replays in loading mode,
    so stored data goes through the same validation as typed input.

    The schema is migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._ensure_schema()
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open task archive at {self._db_path}: {e}") from e
        logger.info("TaskArchive ready db=%s", self._db_path)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    position INTEGER PRIMARY KEY,
                    kind TEXT NOT NULL DEFAULT 'T',
                    is_done INTEGER NOT NULL DEFAULT 0,
                    description TEXT NOT NULL,
                    by_text TEXT,
                    start_text TEXT,
                    end_text TEXT
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskArchive migration: added column %s", name)

            add_col("kind", "TEXT NOT NULL DEFAULT 'T'")
            add_col("is_done", "INTEGER NOT NULL DEFAULT 0")
            add_col("by_text", "TEXT")
            add_col("start_text", "TEXT")
            add_col("end_text", "TEXT")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> TaskRecord:
        return TaskRecord(
            kind=TaskKind.from_db(row["kind"]),
            description=str(row["description"] or ""),
            is_done=bool(row["is_done"]),
            by=row["by_text"],
            start=row["start_text"],
            end=row["end_text"],
        )

    # ---- public API ----

    def count(self) -> int:
        try:
            conn = self._get_conn()
            try:
                (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
                return int(n)
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot count archived tasks: {e}") from e

    def save(self, store: Iterable[TaskRecord]) -> int:
        """Replace the archived snapshot with `store`. Returns the number of rows written."""
        rows = [
            (pos, rec.kind.value, int(rec.is_done), rec.description, rec.by, rec.start, rec.end)
            for pos, rec in enumerate(store, start=1)
        ]
        try:
            conn = self._get_conn()
            try:
                with conn:
                    conn.execute("DELETE FROM tasks")
                    conn.executemany(
                        """
                        INSERT INTO tasks(
                            position, kind, is_done, description,
                            by_text, start_text, end_text
                        )
                        VALUES (?, ?, ?, ?, ?, ?, ?)
                        """,
                        rows,
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot save tasks to {self._db_path}: {e}") from e
        logger.debug("TaskArchive saved %d tasks", len(rows))
        return len(rows)

    def load_records(self) -> list[TaskRecord]:
        """Read archived rows; rows that fail validation (empty description) are skipped."""
        try:
            conn = self._get_conn()
            try:
                rows = conn.execute("SELECT * FROM tasks ORDER BY position ASC").fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot load tasks from {self._db_path}: {e}") from e

        out: list[TaskRecord] = []
        for row in rows:
            try:
                out.append(self._row_to_record(row))
            except ValueError:
                logger.warning("Skipping archived task at position %s (empty description)", row["position"])
        return out

    def load_lines(self) -> list[str]:
        """
        Command lines that rebuild the archived list when replayed in order:
        the creating command for each task, then "mark <n>" for finished ones.
        """
        lines: list[str] = []
        for n, rec in enumerate(self.load_records(), start=1):
            lines.append(rec.to_command_line())
            if rec.is_done:
                lines.append(f"mark {n}")
        return lines

    def snapshot(self) -> TaskStore:
        return TaskStore(self.load_records())
