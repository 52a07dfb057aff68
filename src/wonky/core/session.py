# src/wonky/core/session.py

"""
Line-processing session shared by every front-end.

ACTIVE -> TERMINATED on a successful "bye". A terminated session ignores input.
Each line is resolved, dispatched and (for mutating commands) saved before the
next one is read; nothing here runs concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import StrEnum

from ..cli.commands import COMMAND_TABLE, CommandWord, resolve, split_line, typo_suggestion
from ..errors import LineProcessingError, WonkyError
from ..tasks.task_archive import TaskArchive
from ..tasks.task_store import TaskStore
from .dispatcher import DispatchError, Dispatcher
from .responder import Responder

logger = logging.getLogger(__name__)

ExitHook = Callable[[float], None]


class SessionState(StrEnum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class Session:
    def __init__(
        self,
        dispatcher: Dispatcher,
        *,
        archive: TaskArchive | None = None,
        exit_delay: float = 1.0,
        on_exit: ExitHook | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.archive = archive
        self.exit_delay = exit_delay
        self.on_exit = on_exit
        self.state = SessionState.ACTIVE

    @property
    def responder(self) -> Responder:
        return self.dispatcher.responder

    @property
    def store(self) -> TaskStore:
        return self.dispatcher.store

    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    # ---- line processing ----

    def process_line(self, line: str) -> DispatchError | None:
        """
        Handle one input line.

        User mistakes end up in the responder; only WonkyError (storage, ...) escapes.
        Anything else unexpected is wrapped in LineProcessingError.
        """
        if not self.is_active():
            return None
        try:
            return self._process(line)
        except WonkyError:
            raise
        except Exception as e:
            raise LineProcessingError(line, e) from e

    def _process(self, line: str) -> DispatchError | None:
        command, argument = resolve(line)
        if command is None:
            token, _ = split_line(line)
            if not token:
                return None
            if not self.responder.loading:
                self.responder.unknown_command(token)
                self.responder.suggest_command(typo_suggestion(token))
            return None

        err = self.dispatcher.dispatch(command, argument)
        if err is not None or self.responder.loading:
            return err

        if command is CommandWord.BYE:
            self._terminate()
        elif COMMAND_TABLE[command].mutates:
            self.save()
        return None

    def _terminate(self) -> None:
        self.state = SessionState.TERMINATED
        logger.info("Session terminated.")
        if self.on_exit is not None:
            self.on_exit(self.exit_delay)

    # ---- persistence ----

    def save(self) -> None:
        if self.archive is None:
            return
        self.archive.save(self.store)

    def load(self, lines: Iterable[str]) -> int:
        """
        Replay stored command lines without user-facing chatter.

        Returns the number of lines replayed. The reply buffer is cleared afterwards.
        """
        self.responder.loading = True
        n = 0
        try:
            for line in lines:
                self.process_line(line)
                n += 1
        finally:
            self.responder.loading = False
            self.responder.flush()
        logger.info("Replayed %d stored lines, %d tasks loaded.", n, self.store.size())
        return n

    def load_archive(self) -> int:
        if self.archive is None:
            return 0
        return self.load(self.archive.load_lines())
