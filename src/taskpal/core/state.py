# src/taskpal/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class SessionState:
    # Settings object (real Settings or a test namespace).
    settings: object

    tasks: TaskList
    store: TaskStore

    running: bool = True
