# src/duke/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import OutOfRangeError
from .task_models import Task


class TaskList:
    """
    Ordered task collection with 1-based positions.

    Not thread-safe: callers that share one list hold AppState.lock around
    add/get/remove and the following save.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def _check(self, index: int) -> None:
        if index < 1 or index > len(self._tasks):
            raise OutOfRangeError(index, len(self._tasks))

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index - 1]

    def remove(self, index: int) -> Task:
        self._check(index)
        return self._tasks.pop(index - 1)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"TaskList(size={len(self._tasks)})"
