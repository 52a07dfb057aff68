# src/wonky/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from .task_models import TaskRecord

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered in-memory task list.

    Indices are 0-based here; callers convert from the 1-based numbers users type.
    An index keeps pointing at the same record until add/remove changes the list.
    """

    def __init__(self, records: list[TaskRecord] | None = None) -> None:
        self._records: list[TaskRecord] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(self._records)

    def size(self) -> int:
        return len(self._records)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self._records)

    def get(self, index: int) -> TaskRecord:
        if not self.in_range(index):
            raise IndexError(f"task index {index} out of range (size={len(self._records)})")
        return self._records[index]

    def add(self, record: TaskRecord) -> int:
        """Append a record; returns its 1-based display number."""
        self._records.append(record)
        logger.debug("Task added kind=%s total=%d", record.kind.name, len(self._records))
        return len(self._records)

    def remove(self, index: int) -> TaskRecord:
        record = self.get(index)
        del self._records[index]
        logger.debug("Task removed index=%d total=%d", index, len(self._records))
        return record

    def set_done(self, index: int, done: bool) -> bool:
        """Set the done flag. Returns False when it already had that value."""
        record = self.get(index)
        if record.is_done == done:
            return False
        record.is_done = done
        return True

    def find(self, keyword: str) -> list[tuple[int, TaskRecord]]:
        """Case-insensitive substring search; pairs carry 1-based numbers."""
        needle = keyword.strip().lower()
        if not needle:
            return []
        return [
            (i, rec)
            for i, rec in enumerate(self._records, start=1)
            if needle in rec.description.lower()
        ]

    def clear(self) -> None:
        self._records.clear()
