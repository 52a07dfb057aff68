# src/wonky/cli/commands.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Arity marker for commands that take free text (one or more tokens).
FREE_TEXT = -1


class CommandWord(str, Enum):
    """
    Closed set of command words understood by the bot.

    Declaration order matters: typo suggestions scan it front to back
    and return the first hit.
    """

    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    DELETE = "delete"
    FIND = "find"
    HELP = "help"

    @property
    def literal(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, token: str) -> CommandWord | None:
        """Case-sensitive lookup; unknown tokens give None."""
        for cmd in cls:
            if cmd.value == token:
                return cmd
        return None


@dataclass(frozen=True, slots=True)
class CommandSpec:
    word: CommandWord
    arity: int
    usage: str
    help_text: str
    mutates: bool = False


COMMAND_TABLE: dict[CommandWord, CommandSpec] = {
    spec.word: spec
    for spec in (
        CommandSpec(CommandWord.BYE, 0, "bye", "Say goodbye and quit."),
        CommandSpec(CommandWord.LIST, 0, "list", "Show all tasks."),
        CommandSpec(CommandWord.MARK, 1, "mark <n>", "Mark task n as done.", mutates=True),
        CommandSpec(CommandWord.UNMARK, 1, "unmark <n>", "Mark task n as not done.", mutates=True),
        CommandSpec(CommandWord.TODO, FREE_TEXT, "todo <description>", "Add a todo.", mutates=True),
        CommandSpec(
            CommandWord.DEADLINE,
            FREE_TEXT,
            "deadline <description> /by <when>",
            "Add a task with a deadline.",
            mutates=True,
        ),
        CommandSpec(
            CommandWord.EVENT,
            FREE_TEXT,
            "event <description> /from <start> /to <end>",
            "Add an event.",
            mutates=True,
        ),
        CommandSpec(CommandWord.DELETE, 1, "delete <n>", "Remove task n.", mutates=True),
        CommandSpec(CommandWord.FIND, FREE_TEXT, "find <keyword>", "Search task descriptions."),
        CommandSpec(CommandWord.HELP, 0, "help", "Show available commands."),
    )
}


def split_line(raw_line: str) -> tuple[str, str]:
    """Split a trimmed line on its first whitespace run: (token, remainder)."""
    parts = raw_line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def resolve(raw_line: str) -> tuple[CommandWord | None, str]:
    """
    Map an input line to (command, argument text).

    The command is None when the first token is not a known command word.
    """
    token, argument = split_line(raw_line)
    return CommandWord.lookup(token), argument


def typo_suggestion(invalid: str) -> str | None:
    """
    Suggest the command the user probably meant.

    Only literals of the same length that differ in exactly one position
    qualify; the first one in declaration order wins.
    """
    for cmd in CommandWord:
        literal = cmd.literal
        if len(literal) != len(invalid):
            continue
        matches = sum(1 for a, b in zip(literal, invalid) if a == b)
        if matches == len(literal) - 1:
            return literal.lower()
    return None


def count_tokens(argument: str) -> int:
    return len(argument.split())


def arity_matches(word: CommandWord, argument: str) -> bool:
    expected = COMMAND_TABLE[word].arity
    n = count_tokens(argument)
    if expected == FREE_TEXT:
        return n >= 1
    return n == expected


def build_help() -> str:
    lines = ["Available commands:"]
    for spec in COMMAND_TABLE.values():
        lines.append(f"  {spec.usage} - {spec.help_text}")
    return "\n".join(lines)
