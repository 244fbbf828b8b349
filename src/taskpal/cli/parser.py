# src/taskpal/cli/parser.py

"""
Command parser.

Turns a raw input line into a Command plus validated ParsedArgs.
Argument fields are located by searching for marker substrings ("/by ",
"/from ", "/to ") in the text after the keyword, so extra whitespace is fine.

Indices are parsed but not range-checked here; the session checks them
against the current list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from ..core.errors import (
    DateParseError,
    EmptyArgumentError,
    MalformedCommandError,
    MissingMarkerError,
)
from ..tasks.task_models import parse_date

BY_MARKER = "/by "
FROM_MARKER = "/from "
TO_MARKER = "/to "

DEADLINE_USAGE = "deadline <description> /by <yyyy-mm-dd>"
EVENT_USAGE = "event <description> /from <from> /to <to>"
UPDATE_USAGE = "update <index> <from> <to>"

# Field separator of the data file; it cannot appear inside a stored field.
FIELD_SEP = "|"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class Command(StrEnum):
    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"
    UPDATE = "update"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ParsedArgs:
    index: int | None = None
    description: str | None = None
    by: date | None = None
    start: str | None = None
    end: str | None = None
    keyword: str | None = None


NO_ARGS = ParsedArgs()


def parse_command(line: str | None) -> Command:
    if not line or not line.strip():
        return Command.UNKNOWN
    first = line.split(maxsplit=1)[0].lower()
    if first == Command.UNKNOWN.value:
        return Command.UNKNOWN
    try:
        return Command(first)
    except ValueError:
        return Command.UNKNOWN


def parse_args(command: Command, line: str) -> ParsedArgs:
    match command:
        case Command.MARK | Command.UNMARK | Command.DELETE:
            return _parse_index_only(command, line)
        case Command.TODO:
            return _parse_todo(line)
        case Command.DEADLINE:
            return _parse_deadline(line)
        case Command.EVENT:
            return _parse_event(line)
        case Command.FIND:
            return _parse_find(line)
        case Command.UPDATE:
            return _parse_update(line)
        case _:
            return NO_ARGS


def parse(line: str) -> tuple[Command, ParsedArgs]:
    command = parse_command(line)
    return command, parse_args(command, line)


# ---- helpers ----


def _remainder(line: str) -> str:
    """Text after the command keyword, untrimmed on the right."""
    parts = line.strip().split(maxsplit=1)
    return parts[1] if len(parts) > 1 else ""


def _parse_index(token: str) -> int | None:
    """ASCII digits with an optional sign; anything else is None."""
    if not _INDEX_RE.fullmatch(token):
        return None
    return int(token)


def _reject_separator(command: Command, field_name: str, value: str) -> None:
    if FIELD_SEP in value:
        raise MalformedCommandError(
            f"The {field_name} of a {command.value} cannot contain '{FIELD_SEP}'."
        )


def _parse_index_only(command: Command, line: str) -> ParsedArgs:
    tokens = line.split()
    if len(tokens) < 2:
        raise EmptyArgumentError(command.value, f"Please give the index of the task to {command.value}.")
    idx = _parse_index(tokens[1])
    if idx is None:
        raise EmptyArgumentError(
            command.value, f"The index for {command.value} must be a whole number, got '{tokens[1]}'."
        )
    return ParsedArgs(index=idx)


def _parse_todo(line: str) -> ParsedArgs:
    desc = _remainder(line).strip()
    if not desc:
        raise EmptyArgumentError(Command.TODO.value)
    _reject_separator(Command.TODO, "description", desc)
    return ParsedArgs(description=desc)


def _parse_deadline(line: str) -> ParsedArgs:
    body = _remainder(line)
    by_idx = body.find(BY_MARKER)
    if by_idx < 0:
        raise MissingMarkerError(Command.DEADLINE.value, DEADLINE_USAGE)

    desc = body[:by_idx].strip()
    date_text = body[by_idx + len(BY_MARKER) :].strip()
    if not desc:
        raise EmptyArgumentError(Command.DEADLINE.value)
    _reject_separator(Command.DEADLINE, "description", desc)

    try:
        by = parse_date(date_text)
    except ValueError:
        raise DateParseError(date_text) from None
    return ParsedArgs(description=desc, by=by)


def _parse_event(line: str) -> ParsedArgs:
    body = _remainder(line)
    from_idx = body.find(FROM_MARKER)
    to_idx = body.find(TO_MARKER)
    if from_idx < 0 or to_idx < 0 or to_idx <= from_idx:
        raise MissingMarkerError(Command.EVENT.value, EVENT_USAGE)

    desc = body[:from_idx].strip()
    start = body[from_idx + len(FROM_MARKER) : to_idx].strip()
    end = body[to_idx + len(TO_MARKER) :].strip()
    if not desc or not start or not end:
        raise EmptyArgumentError(Command.EVENT.value)
    _reject_separator(Command.EVENT, "description", desc)
    _reject_separator(Command.EVENT, "from", start)
    _reject_separator(Command.EVENT, "to", end)
    return ParsedArgs(description=desc, start=start, end=end)


def _parse_find(line: str) -> ParsedArgs:
    kw = _remainder(line).strip()
    if not kw:
        raise EmptyArgumentError(Command.FIND.value, "Please give a keyword to find.")
    return ParsedArgs(keyword=kw)


def _parse_update(line: str) -> ParsedArgs:
    tokens = line.split()
    if len(tokens) != 4:
        raise MalformedCommandError(f"Updates are only for events, try the format: {UPDATE_USAGE}")
    idx = _parse_index(tokens[1])
    if idx is None:
        raise MalformedCommandError(f"Index must be a whole number, got '{tokens[1]}'.")
    _reject_separator(Command.UPDATE, "from", tokens[2])
    _reject_separator(Command.UPDATE, "to", tokens[3])
    return ParsedArgs(index=idx, start=tokens[2], end=tokens[3])
