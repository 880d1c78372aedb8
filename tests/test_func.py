from datetime import datetime

import pytest

from tareas.cola import Task, TaskQueue
from tareas.func import (
    DuplicateTaskError,
    InvalidDateError,
    check_name,
    compute_priority,
    load_tasks,
    save_tasks,
    validate_deadline,
)

NOW = datetime(2024, 1, 1, 0)


def test_past_date_rejected():
    with pytest.raises(InvalidDateError, match="Error, datos incorrectos"):
        validate_deadline(10, 31, 12, 2023, NOW)


def test_leap_day_accepted_only_in_leap_year():
    validate_deadline(10, 29, 2, 2028, NOW)
    with pytest.raises(InvalidDateError):
        validate_deadline(10, 29, 2, 2027, NOW)


@pytest.mark.parametrize("hour, day, month", [(10, 1, 13), (10, 31, 4), (25, 1, 5)])
def test_out_of_range_values_rejected(hour, day, month):
    with pytest.raises(InvalidDateError):
        validate_deadline(hour, day, month, 2025, NOW)


def test_priority_bands():
    assert compute_priority(0, 2, 1, 2024, NOW) == 1
    assert compute_priority(0, 4, 1, 2024, NOW) == 2
    assert compute_priority(0, 5, 1, 2024, NOW) == 2
    assert compute_priority(0, 8, 1, 2024, NOW) == 3


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "tareas.txt"
    queue = TaskQueue([Task("A", 3), Task("B", 1)])
    save_tasks(path, queue)
    assert path.read_text(encoding="utf-8") == "B, 1\nA, 3\n"
    loaded = TaskQueue()
    load_tasks(path, loaded)
    assert list(loaded) == list(queue)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks(tmp_path / "nope.txt", TaskQueue())


def test_check_name_duplicate():
    queue = TaskQueue([Task("A", 1)])
    check_name("B", queue)
    with pytest.raises(DuplicateTaskError):
        check_name("A", queue)
    assert len(queue) == 1