# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duke.core.state import AppState
from duke.tasks.task_list import TaskList
from duke.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="Duke",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "logs",
        tasks_path=tmp_path / "data" / "tasks.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState with an empty list.

    NOTE: the real flat-file TaskStore is used here because the file contents
    after each command are part of what we want to test.
    """
    return AppState(settings=settings, tasks=TaskList(), store=store)
