# src/taskpal/core/errors.py

"""
Error taxonomy.

Every error carries a user-facing message; the session turns them into replies.
Storage errors raised during startup are handled by the bootstrap instead.
"""

from __future__ import annotations


class TaskPalError(Exception):
    """Base class for every expected failure in taskpal."""


# ---- command input ----


class EmptyArgumentError(TaskPalError, ValueError):
    def __init__(self, command: str, detail: str | None = None) -> None:
        self.command = command
        super().__init__(detail or f"The description of a {command} cannot be empty.")


class MissingMarkerError(TaskPalError, ValueError):
    def __init__(self, command: str, usage: str) -> None:
        self.command = command
        super().__init__(f"{command} should be in the format: {usage}")


class DateParseError(TaskPalError, ValueError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"'{text}' is not a valid date (expected yyyy-mm-dd).")


class MalformedCommandError(TaskPalError, ValueError):
    pass


class UnrecognizedCommandError(TaskPalError):
    def __init__(self, line: str = "") -> None:
        self.line = line
        super().__init__("I'm sorry, but I don't know what that means :-(")


# ---- task list ----


class TaskIndexError(TaskPalError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        if size == 0:
            msg = f"Index {index} is out of bounds: the list is empty."
        else:
            msg = f"Index {index} is out of bounds (valid: 0 to {size - 1})."
        super().__init__(msg)


class WrongTaskKindError(TaskPalError):
    def __init__(self, index: int, expected: str, actual: str) -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(f"Task {index} is a {actual}; only {expected} tasks can be updated.")


# ---- storage ----


class StorageError(TaskPalError):
    pass


class StorageIOError(StorageError):
    """File system failure while ensuring, loading, appending or rewriting."""


class CorruptStorageError(StorageError):
    """A persisted line could not be decoded. Aborts the whole load."""

    lineno: int | None = None

    def __str__(self) -> str:
        msg = super().__str__()
        if self.lineno is None:
            return msg
        return f"line {self.lineno}: {msg}"


class UnknownTaskKindError(CorruptStorageError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown task type '{kind}' in data file.")


class MalformedLineError(CorruptStorageError):
    pass


class StorageDateError(CorruptStorageError, DateParseError):
    def __init__(self, text: str) -> None:
        DateParseError.__init__(self, text)
