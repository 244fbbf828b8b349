# src/taskpal/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the type field of a storage line.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @classmethod
    def from_storage(cls, raw: str) -> TaskKind | None:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


_PREFIXES = {
    TaskKind.TODO: "[T]",
    TaskKind.DEADLINE: "[D]",
    TaskKind.EVENT: "[E]",
}

# Fixed English abbreviations so rendering does not depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(slots=True)
class Task:
    kind: ClassVar[TaskKind]

    description: str
    done: bool = field(default=False, kw_only=True)

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def __str__(self) -> str:
        return render_task(self)


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    by: date


@dataclass(slots=True)
class Event(Task):
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: str
    end: str

    def update_range(self, start: str, end: str) -> None:
        self.start, self.end = start, end


def format_date(d: date) -> str:
    """Render a date as e.g. 'Sep 1 2025'."""
    return f"{_MONTHS[d.month - 1]} {d.day} {d.year}"


def parse_date(text: str) -> date:
    """Parse a strict yyyy-mm-dd date; raises ValueError otherwise."""
    text = text.strip()
    if not _ISO_DATE_RE.fullmatch(text):
        raise ValueError(f"not a yyyy-mm-dd date: {text!r}")
    return date.fromisoformat(text)


def render_task(task: Task) -> str:
    head = f"{task.kind.prefix}[{task.status_icon}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {format_date(by)})"
        case Event(start=start, end=end):
            return f"{head} (from: {start} to: {end})"
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")
