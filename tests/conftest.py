# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpal.core.session import Session
from taskpal.core.state import SessionState
from taskpal.tasks.task_list import TaskList
from taskpal.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and SessionState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpal-test",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "duke.txt",
        log_dir=data_dir,
        strict_load=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    s = TaskStore(settings.tasks_path)
    s.ensure_file()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> SessionState:
    return SessionState(settings=settings, tasks=TaskList(), store=store)


@pytest.fixture()
def session(state: SessionState) -> Session:
    return Session(state)
