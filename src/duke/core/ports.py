# src/duke/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session loop and bootstrap depend on this Protocol instead of the
concrete flat-file store, which keeps storage swappable and tests simple.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """
    Whole-list persistence.

    load() raises StorageCorruptError, save() raises StorageWriteError.
    """

    @property
    def path(self) -> Path: ...

    def exists(self) -> bool: ...
    def load(self) -> TaskList: ...
    def save(self, tasks: TaskList) -> None: ...
