# tests/test_parser.py

from __future__ import annotations

from datetime import date

import pytest

from taskpal.cli.parser import Command, ParsedArgs, parse, parse_args, parse_command
from taskpal.core.errors import (
    DateParseError,
    EmptyArgumentError,
    MalformedCommandError,
    MissingMarkerError,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("bye", Command.BYE),
        ("list", Command.LIST),
        ("  mark 2", Command.MARK),
        ("unmark 0", Command.UNMARK),
        ("delete 1", Command.DELETE),
        ("todo read", Command.TODO),
        ("Deadline x /by 2025-01-01", Command.DEADLINE),
        ("event x /from a /to b", Command.EVENT),
        ("find book", Command.FIND),
        ("update 1 a b", Command.UPDATE),
        ("", Command.UNKNOWN),
        ("   ", Command.UNKNOWN),
        ("blah", Command.UNKNOWN),
        ("todos x", Command.UNKNOWN),
        ("unknown", Command.UNKNOWN),
    ],
)
def test_parse_command_classifies_first_token(line: str, expected: Command) -> None:
    assert parse_command(line) is expected


def test_index_commands_accept_any_integer() -> None:
    assert parse_args(Command.MARK, "mark 3").index == 3
    assert parse_args(Command.DELETE, "delete   -1").index == -1  # range is checked later


@pytest.mark.parametrize("line", ["mark", "unmark  ", "delete two"])
def test_index_commands_need_a_number(line: str) -> None:
    command = parse_command(line)
    with pytest.raises(EmptyArgumentError):
        parse_args(command, line)


def test_todo_description_is_trimmed() -> None:
    assert parse("todo    buy milk  ") == (Command.TODO, ParsedArgs(description="buy milk"))


def test_empty_todo_raises() -> None:
    with pytest.raises(EmptyArgumentError) as exc_info:
        parse("todo   ")
    assert exc_info.value.command == "todo"
    assert "todo cannot be empty" in str(exc_info.value)


def test_deadline_parses_description_and_date() -> None:
    args = parse_args(Command.DEADLINE, "deadline  submit report   /by 2025-09-01 ")
    assert args.description == "submit report"
    assert args.by == date(2025, 9, 1)


def test_deadline_errors() -> None:
    with pytest.raises(MissingMarkerError):
        parse("deadline submit report 2025-09-01")
    with pytest.raises(EmptyArgumentError):
        parse("deadline /by 2025-09-01")
    with pytest.raises(DateParseError):
        parse("deadline submit /by next friday")
    with pytest.raises(DateParseError):
        parse("deadline submit /by 2025-13-01")


def test_event_parses_three_fields() -> None:
    args = parse_args(Command.EVENT, "event project meeting /from Mon 2pm   /to 4pm")
    assert (args.description, args.start, args.end) == ("project meeting", "Mon 2pm", "4pm")


@pytest.mark.parametrize(
    "line",
    [
        "event meeting /to 4pm",
        "event meeting /from 2pm",
        "event meeting /to 4pm /from 2pm",
    ],
)
def test_event_marker_errors(line: str) -> None:
    with pytest.raises(MissingMarkerError):
        parse(line)


@pytest.mark.parametrize(
    "line",
    [
        "event /from 2pm /to 4pm",
        "event meeting /from  /to 4pm",
    ],
)
def test_event_empty_fields(line: str) -> None:
    with pytest.raises(EmptyArgumentError):
        parse(line)


def test_find_keyword() -> None:
    assert parse_args(Command.FIND, "find   book ").keyword == "book"
    with pytest.raises(EmptyArgumentError):
        parse("find")


def test_update_needs_exactly_three_tokens() -> None:
    args = parse_args(Command.UPDATE, "update 1 3pm 5pm")
    assert (args.index, args.start, args.end) == (1, "3pm", "5pm")
    for line in ("update 1 3pm", "update 1 3pm 5pm extra", "update"):
        with pytest.raises(MalformedCommandError):
            parse(line)
    with pytest.raises(MalformedCommandError):
        parse("update one 3pm 5pm")


def test_commands_without_args() -> None:
    assert parse("list") == (Command.LIST, ParsedArgs())
    assert parse("bye now") == (Command.BYE, ParsedArgs())


@pytest.mark.parametrize(
    "line",
    [
        "todo a | b",
        "deadline x|y /by 2025-09-01",
        "event e /from a|b /to c",
        "event e /from a /to b|c",
        "event e|f /from a /to c",
        "update 0 a|b c",
        "update 0 a b|c",
    ],
)
def test_field_separator_is_rejected(line: str) -> None:
    with pytest.raises(MalformedCommandError) as exc_info:
        parse(line)
    assert "cannot contain '|'" in str(exc_info.value)


@pytest.mark.parametrize("token", ["1_0", "٣", "1.0", "0x1"])
def test_index_must_be_plain_ascii_integer(token: str) -> None:
    with pytest.raises(EmptyArgumentError):
        parse(f"mark {token}")
    with pytest.raises(MalformedCommandError):
        parse(f"update {token} a b")


def test_index_accepts_explicit_sign() -> None:
    assert parse_args(Command.UNMARK, "unmark +2").index == 2
    assert parse_args(Command.UPDATE, "update -0 a b").index == 0
