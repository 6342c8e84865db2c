# src/duke/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..core.errors import CorruptRecordError, StorageCorruptError, StorageWriteError
from .task_list import TaskList
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store: one `Task.encode()` record per line, UTF-8.

    - load(): missing file -> empty list; any bad line fails the whole load.
    - save(): full rewrite through a sibling .tmp file + os.replace.

    The store keeps no tasks of its own; it only converts between the list
    and the file.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No task file at %s; starting empty.", self._path)
            return TaskList()

        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", self._path, e)
            raise StorageCorruptError(self._path, reason=str(e)) from e

        # Records are joined by "\n" only; other line-break characters are data.
        tasks = TaskList()
        for line_no, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.add(Task.decode(line))
            except CorruptRecordError as e:
                logger.warning("Corrupt record in %s line %d: %s", self._path, line_no, e.reason)
                raise StorageCorruptError(self._path, line_no=line_no, reason=e.reason) from e

        logger.info("Loaded %d tasks from %s", tasks.size(), self._path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        payload = "".join(task.encode() + "\n" for task in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageWriteError(self._path, reason=e.strerror or str(e)) from e

        logger.debug("Saved %d tasks to %s", tasks.size(), self._path)
