# src/taskpal/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_codec import encode_line
from .task_models import Task


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Insertion order is both the display order and the storage order.
    Indices are 0-based and checked against the current size on every call;
    negative indices are rejected rather than counted from the end.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._tasks):
            raise TaskIndexError(i, len(self._tasks))

    def get(self, i: int) -> Task:
        self._check_index(i)
        return self._tasks[i]

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        return len(self._tasks)

    def remove(self, i: int) -> tuple[Task, int]:
        self._check_index(i)
        removed = self._tasks.pop(i)
        return removed, len(self._tasks)

    def all(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Return (index, task) pairs whose rendered text contains keyword, ignoring case."""
        needle = keyword.strip().casefold()
        return [(i, t) for i, t in enumerate(self._tasks) if needle in str(t).casefold()]

    def to_storage_lines(self) -> list[str]:
        return [encode_line(t) for t in self._tasks]
