# tests/test_task_list.py

from __future__ import annotations

import pytest

from duke.core.errors import OutOfRangeError
from duke.tasks.task_list import TaskList
from duke.tasks.task_models import Task


def _list_of(*descriptions: str) -> TaskList:
    return TaskList(Task.todo(d) for d in descriptions)


def test_add_appends_and_returns_new_size() -> None:
    tasks = TaskList()
    assert tasks.is_empty()
    assert tasks.add(Task.todo("a")) == 1
    assert tasks.add(Task.todo("a")) == 2  # duplicates allowed
    assert tasks.size() == len(tasks) == 2
    assert not tasks.is_empty()


def test_get_is_one_based() -> None:
    tasks = _list_of("a", "b", "c")
    assert tasks.get(1).description == "a"
    assert tasks.get(3).description == "c"
    assert [t.description for t in tasks] == ["a", "b", "c"]


@pytest.mark.parametrize("index", [0, -1, 4, 100])
def test_get_and_remove_check_bounds(index: int) -> None:
    tasks = _list_of("a", "b", "c")
    with pytest.raises(OutOfRangeError):
        tasks.get(index)
    with pytest.raises(OutOfRangeError):
        tasks.remove(index)
    assert tasks.size() == 3


def test_remove_shifts_later_positions_down() -> None:
    tasks = _list_of("a", "b", "c", "d")
    removed = tasks.remove(2)
    assert removed.description == "b"
    assert tasks.size() == 3
    # what was at i+1 is now at i
    assert tasks.get(2).description == "c"
    assert tasks.get(3).description == "d"


def test_get_on_empty_list_fails() -> None:
    with pytest.raises(OutOfRangeError) as exc:
        TaskList().get(1)
    assert exc.value.size == 0
