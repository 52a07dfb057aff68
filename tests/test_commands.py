# tests/test_commands.py

from __future__ import annotations

import pytest

from wonky.cli.commands import (
    COMMAND_TABLE,
    CommandWord,
    arity_matches,
    build_help,
    resolve,
    split_line,
    typo_suggestion,
)


def test_resolve_splits_on_first_whitespace_run() -> None:
    assert resolve("  todo   read  a book  ") == (CommandWord.TODO, "read  a book")
    assert resolve("list") == (CommandWord.LIST, "")
    assert resolve("mark\t3") == (CommandWord.MARK, "3")


def test_resolve_is_case_sensitive_and_closed() -> None:
    assert resolve("MARK 1") == (None, "1")
    assert resolve("hello there") == (None, "there")
    assert resolve("") == (None, "")


def test_split_line_empty() -> None:
    assert split_line("   ") == ("", "")


@pytest.mark.parametrize(
    ("typo", "expected"),
    [
        ("mork", "mark"),
        ("unmork", "unmark"),
        ("lisr", "list"),
        ("bya", "bye"),
        ("tode", "todo"),
        ("lind", "find"),
        ("fist", "list"),
        ("mar", None),
        ("mark", None),
        ("xyzw", None),
        ("", None),
    ],
)
def test_typo_suggestion_same_length_one_mismatch(typo: str, expected: str | None) -> None:
    assert typo_suggestion(typo) == expected


def test_arity_rules() -> None:
    assert arity_matches(CommandWord.MARK, "1")
    assert not arity_matches(CommandWord.MARK, "")
    assert not arity_matches(CommandWord.MARK, "1 2")
    assert arity_matches(CommandWord.LIST, "")
    assert not arity_matches(CommandWord.LIST, "all")
    assert arity_matches(CommandWord.TODO, "read a book")
    assert not arity_matches(CommandWord.TODO, "   ")


def test_every_command_has_a_table_entry_and_help_line() -> None:
    help_text = build_help()
    for cmd in CommandWord:
        assert cmd in COMMAND_TABLE
        assert COMMAND_TABLE[cmd].usage in help_text
