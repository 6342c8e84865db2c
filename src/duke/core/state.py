# src/duke/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    """
    Explicit session context handed to the interpreter and the console loop.

    `lock` guards the "interpret + save" sequence so the list and the file
    agree after every command, even if a second caller shares this state.
    """

    # Settings object (duke.config.Settings or a test double).
    settings: object

    tasks: TaskList
    store: TaskRepo

    # Start-up messages shown before the greeting (e.g. "Loaded from ...").
    notices: list[str] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock)
