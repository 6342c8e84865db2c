# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from duke.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_drops_library_noise() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("duke.tasks.task_store", logging.INFO))
    assert f.filter(_record("duke", logging.DEBUG))
    assert not f.filter(_record("dukebox", logging.INFO))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
    assert not f.filter(_record("urllib3", logging.WARNING))


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logger: None) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
    assert log_file == tmp_path / "logs" / "duke.log"

    logging.getLogger("duke.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "duke.test: hello file" in log_file.read_text("utf-8")
    assert len(logging.getLogger().handlers) == 2
