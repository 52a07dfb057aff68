# src/wonky/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..cli.commands import CommandWord

STATUS_LINE = "{index}. [{letter}][{mark}] {description}"


class TaskKind(StrEnum):
    """
    Task category.

    The value doubles as the one-letter tag shown in status lines and
    stored in the archive.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def command(self) -> CommandWord:
        return _KIND_COMMANDS[self]

    @classmethod
    def from_db(cls, raw: str | None) -> TaskKind:
        if not raw:
            return cls.TODO
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return cls.TODO


_KIND_COMMANDS: dict[TaskKind, CommandWord] = {
    TaskKind.TODO: CommandWord.TODO,
    TaskKind.DEADLINE: CommandWord.DEADLINE,
    TaskKind.EVENT: CommandWord.EVENT,
}


@dataclass(slots=True)
class TaskRecord:
    kind: TaskKind
    description: str
    is_done: bool = False

    # deadline
    by: str | None = None
    # event
    start: str | None = None
    end: str | None = None

    def __post_init__(self) -> None:
        self.description = (self.description or "").strip()
        if not self.description:
            raise ValueError("description is required")

    @property
    def command(self) -> CommandWord:
        """The command that creates records of this kind."""
        return self.kind.command

    @property
    def literal(self) -> str:
        return self.command.literal

    def status_line(self, index: int) -> str:
        """Format as "<index>. [<letter>][<X or space>] <description>" plus schedule details."""
        line = STATUS_LINE.format(
            index=index,
            letter=self.kind.letter,
            mark="X" if self.is_done else " ",
            description=self.description,
        )
        if self.kind is TaskKind.DEADLINE:
            return f"{line} (by: {self.by})"
        if self.kind is TaskKind.EVENT:
            return f"{line} (from: {self.start} to: {self.end})"
        return line

    def to_command_line(self) -> str:
        """Rebuild the command line that recreates this record (done flag excluded)."""
        if self.kind is TaskKind.DEADLINE:
            return f"{self.literal} {self.description} /by {self.by}"
        if self.kind is TaskKind.EVENT:
            return f"{self.literal} {self.description} /from {self.start} /to {self.end}"
        return f"{self.literal} {self.description}"
