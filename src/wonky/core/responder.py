# src/wonky/core/responder.py

"""
Reply buffer for the current turn.

The dispatcher writes, the active front-end reads with flush().
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..cli.commands import build_help
from ..errors import ResponseError
from ..tasks.task_models import TaskRecord

logger = logging.getLogger(__name__)


class Responder:
    def __init__(self, app_name: str = "Wonky") -> None:
        self.app_name = app_name
        self.loading = False
        self._lines: list[str] = []

    # ---- buffer ----

    def say(self, text: str) -> None:
        logger.debug("reply: %s", text)
        self._lines.append(text)

    def flush(self) -> str:
        out = "\n".join(self._lines)
        self._lines.clear()
        return out

    # ---- session ----

    def greet(self) -> None:
        self.say(f"Hello! I'm {self.app_name}.")
        self.say("What can I do for you? Type help to see what I understand.")

    def bye(self) -> None:
        self.say("Bye. Hope to see you again soon!")

    def bye_in_storage(self) -> None:
        logger.warning("Found a stored 'bye' while loading; ignored.")

    # ---- input problems ----

    def unknown_command(self, token: str) -> None:
        self.say(f"Sorry, I don't know what '{token}' means.")

    def suggest_command(self, suggestion: str | None) -> None:
        if suggestion:
            self.say(f"Did you mean '{suggestion}'?")

    def mismatch_args(self, token: str, usage: str) -> None:
        self.say(f"Wrong number of arguments for '{token}'. Usage: {usage}")

    def expected_integer(self, text: str) -> None:
        self.say(f"Expected an integer task number, but got '{text}'.")

    def out_of_range(self, number: int, size: int) -> None:
        if size == 0:
            self.say(f"Task {number} is out of range: the list is empty.")
        else:
            self.say(f"Task {number} is out of range: pick a number from 1 to {size}.")

    def usage(self, usage: str) -> None:
        self.say(f"Usage: {usage}")

    # ---- task results ----

    def already_marked(self, description: str, done: bool) -> None:
        state = "done" if done else "not done"
        self.say(f"'{description}' is already marked as {state}.")

    def task_marked(self, record: TaskRecord, number: int) -> None:
        if record.is_done:
            self.say("Nice! I've marked this task as done:")
        else:
            self.say("OK, I've marked this task as not done yet:")
        self.say(self._status(record, number))

    def task_added(self, record: TaskRecord, number: int, total: int) -> None:
        self.say("Got it. I've added this task:")
        self.say(self._status(record, number))
        self.say(self._count(total))

    def task_deleted(self, record: TaskRecord, number: int, total: int) -> None:
        self.say("Noted. I've removed this task:")
        self.say(self._status(record, number))
        self.say(self._count(total))

    def list_tasks(self, records: Iterable[TaskRecord]) -> None:
        lines = [rec.status_line(i) for i, rec in enumerate(records, start=1)]
        if not lines:
            self.say("Your task list is empty.")
            return
        self.say("Here are the tasks in your list:")
        for line in lines:
            self.say(line)

    def found_tasks(self, matches: list[tuple[int, TaskRecord]], keyword: str) -> None:
        if not matches:
            self.say(f"No tasks match '{keyword}'.")
            return
        self.say("Here are the matching tasks in your list:")
        for number, rec in matches:
            self.say(rec.status_line(number))

    def help(self) -> None:
        self.say(build_help())

    # ---- helpers ----

    @staticmethod
    def _status(record: TaskRecord, number: int) -> str:
        if number < 1:
            raise ResponseError(f"Cannot render task with number {number}")
        return record.status_line(number)

    @staticmethod
    def _count(total: int) -> str:
        noun = "task" if total == 1 else "tasks"
        return f"Now you have {total} {noun} in the list."
