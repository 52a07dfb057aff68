# tests/test_responder.py

from __future__ import annotations

import pytest

from wonky.core.responder import Responder
from wonky.errors import ResponseError
from wonky.tasks.task_models import TaskKind, TaskRecord


def _todo(description: str = "read book") -> TaskRecord:
    return TaskRecord(kind=TaskKind.TODO, description=description)


def test_out_of_range_on_empty_list(responder: Responder) -> None:
    responder.out_of_range(1, 0)
    assert responder.flush() == "Task 1 is out of range: the list is empty."


def test_out_of_range_names_valid_span(responder: Responder) -> None:
    responder.out_of_range(3, 2)
    assert responder.flush() == "Task 3 is out of range: pick a number from 1 to 2."


@pytest.mark.parametrize(
    ("total", "expected"),
    [
        (0, "Now you have 0 tasks in the list."),
        (1, "Now you have 1 task in the list."),
        (2, "Now you have 2 tasks in the list."),
    ],
)
def test_task_count_wording(responder: Responder, total: int, expected: str) -> None:
    responder.task_deleted(_todo(), 1, total)
    assert responder.flush().splitlines()[-1] == expected


@pytest.mark.parametrize("number", [0, -1])
def test_status_needs_positive_number(responder: Responder, number: int) -> None:
    with pytest.raises(ResponseError):
        responder.task_added(_todo(), number, 1)
    with pytest.raises(ResponseError):
        responder.task_marked(_todo(), number)


def test_flush_empties_buffer(responder: Responder) -> None:
    responder.task_added(_todo(), 1, 1)
    assert responder.flush().splitlines() == [
        "Got it. I've added this task:",
        "1. [T][ ] read book",
        "Now you have 1 task in the list.",
    ]
    assert responder.flush() == ""


def test_suggestion_is_optional(responder: Responder) -> None:
    responder.suggest_command(None)
    assert responder.flush() == ""

    responder.suggest_command("mark")
    assert responder.flush() == "Did you mean 'mark'?"
