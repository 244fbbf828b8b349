# src/taskpal/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..core.errors import CorruptStorageError, StorageIOError
from .task_codec import decode_line, encode_line
from .task_list import TaskList
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store.

    Additions append a single line; every other change (mark, unmark, delete,
    update) rewrites the whole file from the task list. Lines are variable
    width and carry no address, so nothing is ever edited in place.

    Any OSError is re-raised as StorageIOError.
    """

    def __init__(self, path: str | Path = "data/duke.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_file(self) -> None:
        """Create parent directories and an empty file if missing."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Cannot create data file {self._path}: {e}") from e

    def load(self) -> TaskList:
        """
        Read every task from disk.

        Missing file -> empty list. Blank lines are skipped.
        The first corrupt line aborts the load (CorruptStorageError with lineno set).
        """
        if not self._path.exists():
            logger.info("No data file at %s, starting empty.", self._path)
            return TaskList()

        try:
            text = self._path.read_text("utf-8")
        except OSError as e:
            raise StorageIOError(f"Cannot read data file {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_line(line))
            except CorruptStorageError as e:
                e.lineno = lineno
                raise

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return TaskList(tasks)

    def append_line(self, line: str) -> None:
        try:
            # A hand-edited file may lack its final newline.
            prefix = "" if self._ends_with_newline() else "\n"
            with self._path.open("a", encoding="utf-8") as f:
                f.write(prefix + line + "\n")
        except OSError as e:
            raise StorageIOError(f"Cannot write to data file {self._path}: {e}") from e
        logger.debug("Appended line to %s: %s", self._path, line)

    def _ends_with_newline(self) -> bool:
        """True for a missing or empty file, or one whose last byte is a newline."""
        if not self._path.exists():
            return True
        with self._path.open("rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return True
            f.seek(-1, os.SEEK_END)
            return f.read(1) == b"\n"

    def append_task(self, task: Task) -> None:
        self.append_line(encode_line(task))

    def rewrite(self, tasks: TaskList) -> None:
        """Replace the file with tasks.to_storage_lines(); the old file survives a failed write."""
        lines = tasks.to_storage_lines()
        content = "".join(line + "\n" for line in lines)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(content, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageIOError(f"Cannot write to data file {self._path}: {e}") from e
        logger.debug("Rewrote %s with %d tasks", self._path, len(lines))
