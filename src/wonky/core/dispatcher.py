# src/wonky/core/dispatcher.py

"""
Command dispatcher.

Validates the argument shape of a resolved command, applies it to the TaskStore
and writes the reply into the Responder. Bad input is reported, never raised:
dispatch() returns a DispatchError describing what went wrong (or None).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import StrEnum

from ..cli.commands import COMMAND_TABLE, CommandWord, arity_matches
from ..tasks.task_models import TaskKind, TaskRecord
from ..tasks.task_store import TaskStore
from .responder import Responder

logger = logging.getLogger(__name__)

# Plain signed ASCII digits only (no "1_0", no other scripts).
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class DispatchError(StrEnum):
    WRONG_ARITY = "wrong_arity"
    NOT_AN_INTEGER = "not_an_integer"
    OUT_OF_RANGE = "out_of_range"
    ALREADY_SET = "already_set"
    BAD_FORMAT = "bad_format"


class Dispatcher:
    def __init__(self, store: TaskStore, responder: Responder) -> None:
        self.store = store
        self.responder = responder
        self._handlers: dict[CommandWord, Callable[[str], DispatchError | None]] = {
            CommandWord.BYE: self._bye,
            CommandWord.LIST: self._list,
            CommandWord.MARK: lambda arg: self._set_done(arg, True),
            CommandWord.UNMARK: lambda arg: self._set_done(arg, False),
            CommandWord.TODO: self._todo,
            CommandWord.DEADLINE: self._deadline,
            CommandWord.EVENT: self._event,
            CommandWord.DELETE: self._delete,
            CommandWord.FIND: self._find,
            CommandWord.HELP: self._help,
        }

    def dispatch(self, command: CommandWord, argument: str) -> DispatchError | None:
        argument = argument.strip()
        if not arity_matches(command, argument):
            self.responder.mismatch_args(command.literal, COMMAND_TABLE[command].usage)
            return DispatchError.WRONG_ARITY
        err = self._handlers[command](argument)
        if err is not None:
            logger.debug("dispatch %s %r -> %s", command.literal, argument, err)
        return err

    # ---- index parsing ----

    def _parse_index(self, text: str) -> tuple[int | None, DispatchError | None]:
        """1-based user text -> valid 0-based index, or the reason it is not one."""
        if not INTEGER_RE.fullmatch(text):
            self.responder.expected_integer(text)
            return None, DispatchError.NOT_AN_INTEGER
        number = int(text)
        index = number - 1
        if not self.store.in_range(index):
            self.responder.out_of_range(number, self.store.size())
            return None, DispatchError.OUT_OF_RANGE
        return index, None

    # ---- handlers ----

    def _bye(self, _arg: str) -> DispatchError | None:
        if self.responder.loading:
            self.responder.bye_in_storage()
        else:
            self.responder.bye()
        return None

    def _list(self, _arg: str) -> DispatchError | None:
        self.responder.list_tasks(self.store)
        return None

    def _help(self, _arg: str) -> DispatchError | None:
        self.responder.help()
        return None

    def _set_done(self, arg: str, done: bool) -> DispatchError | None:
        index, err = self._parse_index(arg)
        if err is not None or index is None:
            return err
        record = self.store.get(index)
        if not self.store.set_done(index, done):
            self.responder.already_marked(record.description, done)
            return DispatchError.ALREADY_SET
        self.responder.task_marked(record, index + 1)
        return None

    def _delete(self, arg: str) -> DispatchError | None:
        index, err = self._parse_index(arg)
        if err is not None or index is None:
            return err
        record = self.store.remove(index)
        self.responder.task_deleted(record, index + 1, self.store.size())
        return None

    def _find(self, arg: str) -> DispatchError | None:
        self.responder.found_tasks(self.store.find(arg), arg)
        return None

    def _add(self, record: TaskRecord) -> DispatchError | None:
        number = self.store.add(record)
        self.responder.task_added(record, number, self.store.size())
        return None

    def _todo(self, arg: str) -> DispatchError | None:
        return self._add(TaskRecord(kind=TaskKind.TODO, description=arg))

    def _deadline(self, arg: str) -> DispatchError | None:
        description, sep, by = arg.partition("/by")
        description, by = description.strip(), by.strip()
        if not sep or not description or not by:
            self.responder.usage(COMMAND_TABLE[CommandWord.DEADLINE].usage)
            return DispatchError.BAD_FORMAT
        return self._add(TaskRecord(kind=TaskKind.DEADLINE, description=description, by=by))

    def _event(self, arg: str) -> DispatchError | None:
        description, sep_from, rest = arg.partition("/from")
        start, sep_to, end = rest.partition("/to")
        description, start, end = description.strip(), start.strip(), end.strip()
        if not (sep_from and sep_to) or not (description and start and end):
            self.responder.usage(COMMAND_TABLE[CommandWord.EVENT].usage)
            return DispatchError.BAD_FORMAT
        return self._add(
            TaskRecord(kind=TaskKind.EVENT, description=description, start=start, end=end)
        )
