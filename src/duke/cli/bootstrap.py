# src/duke/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the flat-file TaskStore into AppState,
- loads the saved tasks, falling back to an empty list on a corrupt file.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageCorruptError
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

MESSAGE_LOADED = "Loaded from {path}"


def load_tasks(store: TaskRepo, notices: list[str]) -> TaskList:
    """Load the saved list; a corrupt file is reported and replaced by an empty list."""
    existed = store.exists()
    try:
        tasks = store.load()
    except StorageCorruptError as e:
        logger.warning("Task file %s is unreadable; continuing with an empty list.", e.path)
        notices.append(e.message)
        return TaskList()

    if existed:
        notices.append(MESSAGE_LOADED.format(path=store.path))
    return tasks


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = TaskStore(settings.tasks_path)

    notices: list[str] = []
    tasks = load_tasks(store, notices)

    return AppState(settings=settings, tasks=tasks, store=store, notices=notices)
