# tests/test_task_store.py

from __future__ import annotations

import pytest

from wonky.cli.commands import CommandWord
from wonky.tasks.task_models import TaskKind, TaskRecord
from wonky.tasks.task_store import TaskStore


def test_record_trims_and_rejects_empty_description() -> None:
    rec = TaskRecord(kind=TaskKind.TODO, description="  read book  ")
    assert rec.description == "read book"
    assert rec.is_done is False
    with pytest.raises(ValueError):
        TaskRecord(kind=TaskKind.TODO, description="   ")


def test_status_line_per_kind() -> None:
    todo = TaskRecord(kind=TaskKind.TODO, description="read book")
    deadline = TaskRecord(kind=TaskKind.DEADLINE, description="return book", by="sunday")
    event = TaskRecord(kind=TaskKind.EVENT, description="meeting", start="2pm", end="4pm")
    event.is_done = True

    assert todo.status_line(1) == "1. [T][ ] read book"
    assert deadline.status_line(2) == "2. [D][ ] return book (by: sunday)"
    assert event.status_line(3) == "3. [E][X] meeting (from: 2pm to: 4pm)"


def test_record_command_and_replay_line() -> None:
    deadline = TaskRecord(kind=TaskKind.DEADLINE, description="return book", by="sunday")
    event = TaskRecord(kind=TaskKind.EVENT, description="meeting", start="2pm", end="4pm")

    assert deadline.command is CommandWord.DEADLINE
    assert deadline.literal == "deadline"
    assert deadline.to_command_line() == "deadline return book /by sunday"
    assert event.to_command_line() == "event meeting /from 2pm /to 4pm"
    assert TaskRecord(kind=TaskKind.TODO, description="x").to_command_line() == "todo x"


def test_kind_from_db_falls_back_to_todo() -> None:
    assert TaskKind.from_db("D") is TaskKind.DEADLINE
    assert TaskKind.from_db("e") is TaskKind.EVENT
    assert TaskKind.from_db(None) is TaskKind.TODO
    assert TaskKind.from_db("?") is TaskKind.TODO


def test_store_add_get_remove_keeps_order() -> None:
    store = TaskStore()
    assert store.add(TaskRecord(kind=TaskKind.TODO, description="a")) == 1
    assert store.add(TaskRecord(kind=TaskKind.TODO, description="b")) == 2
    assert store.add(TaskRecord(kind=TaskKind.TODO, description="c")) == 3

    assert store.get(1).description == "b"
    removed = store.remove(0)
    assert removed.description == "a"
    assert [r.description for r in store] == ["b", "c"]
    assert store.size() == len(store) == 2


def test_store_set_done_reports_change() -> None:
    store = TaskStore([TaskRecord(kind=TaskKind.TODO, description="a")])
    assert store.set_done(0, True) is True
    assert store.set_done(0, True) is False
    assert store.get(0).is_done is True
    assert store.set_done(0, False) is True


def test_store_bounds() -> None:
    store = TaskStore([TaskRecord(kind=TaskKind.TODO, description="a")])
    assert store.in_range(0)
    assert not store.in_range(1)
    assert not store.in_range(-1)
    with pytest.raises(IndexError):
        store.get(-1)
    with pytest.raises(IndexError):
        store.remove(5)


def test_store_find_is_case_insensitive_with_display_numbers() -> None:
    store = TaskStore(
        [
            TaskRecord(kind=TaskKind.TODO, description="Read book"),
            TaskRecord(kind=TaskKind.TODO, description="buy milk"),
            TaskRecord(kind=TaskKind.DEADLINE, description="return BOOK", by="fri"),
        ]
    )
    hits = store.find("book")
    assert [n for n, _ in hits] == [1, 3]
    assert store.find("  ") == []


def test_store_clear_resets() -> None:
    store = TaskStore([TaskRecord(kind=TaskKind.TODO, description="a")])
    store.clear()
    assert store.size() == 0
