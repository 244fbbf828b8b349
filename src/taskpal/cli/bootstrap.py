# src/taskpal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the data file (and its directory) exists,
- loads the task list under the configured load policy,
- wires everything into a Session.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import CorruptStorageError
from ..core.session import Session
from ..core.state import SessionState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def load_tasks(store: TaskStore, *, strict: bool = True) -> TaskList:
    """
    Load the task list from the store.

    strict=True: CorruptStorageError propagates and startup should stop.
    strict=False: the error is logged and an empty list is returned; the file
    is left as is until the next rewrite.
    """
    try:
        return store.load()
    except CorruptStorageError:
        if strict:
            raise
        logger.exception("Data file %s is corrupt; starting with an empty list.", store.path)
        return TaskList()


def create_initial_state(*, settings=None) -> SessionState:
    """
    Create SessionState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises StorageError (StorageIOError, or CorruptStorageError in strict mode).
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    store.ensure_file()
    tasks = load_tasks(store, strict=getattr(settings, "strict_load", True))

    return SessionState(settings=settings, tasks=tasks, store=store)


def create_session(*, settings=None) -> Session:
    return Session(create_initial_state(settings=settings))
