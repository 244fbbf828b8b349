# src/taskpal/tasks/task_codec.py

"""
Storage line codec.

One task per line, fields joined by " | ":

    todo | <0|1> | <description>
    deadline | <0|1> | <description> | <yyyy-mm-dd>
    event | <0|1> | <description> | <from> | <to>

Whitespace around "|" is tolerated when decoding.
"""

from __future__ import annotations

from datetime import date

from ..core.errors import MalformedLineError, StorageDateError, UnknownTaskKindError
from .task_models import Deadline, Event, Task, TaskKind, Todo, parse_date

SEP = " | "

_MIN_FIELDS = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def encode_line(task: Task) -> str:
    done = "1" if task.done else "0"
    match task:
        case Todo():
            fields = [task.kind.value, done, task.description]
        case Deadline(by=by):
            fields = [task.kind.value, done, task.description, by.isoformat()]
        case Event(start=start, end=end):
            fields = [task.kind.value, done, task.description, start, end]
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")
    return SEP.join(fields)


def decode_line(line: str) -> Task:
    parts = [p.strip() for p in line.split("|")]
    kind = TaskKind.from_storage(parts[0])
    if kind is None:
        raise UnknownTaskKindError(parts[0])

    if len(parts) < _MIN_FIELDS[kind]:
        raise MalformedLineError(
            f"A {kind.value} line needs {_MIN_FIELDS[kind]} fields, got {len(parts)}."
        )

    done = parts[1] == "1"
    description = parts[2]

    task: Task
    match kind:
        case TaskKind.TODO:
            task = Todo(description, done=done)
        case TaskKind.DEADLINE:
            task = Deadline(description, _parse_stored_date(parts[3]), done=done)
        case TaskKind.EVENT:
            task = Event(description, parts[3], parts[4], done=done)
    return task


def _parse_stored_date(text: str) -> date:
    try:
        return parse_date(text)
    except ValueError:
        raise StorageDateError(text) from None
