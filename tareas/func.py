"""Deadline validation, priority computation and task file storage."""

from __future__ import annotations

import os
from datetime import datetime, timedelta

from .cola import Task, TaskQueue

_DAYS_IN_MONTH = {1: 31, 3: 31, 5: 31, 7: 31, 8: 31, 10: 31, 12: 31, 4: 30, 6: 30, 9: 30, 11: 30}


class InvalidDateError(ValueError):
    """Raised when a deadline is in the past or malformed."""

    def __init__(self, message: str = "Error, datos incorrectos") -> None:
        super().__init__(message)


class DuplicateTaskError(ValueError):
    """Raised when a task with the same name is already queued."""

    def __init__(
        self,
        message: str = "No se ha podido añadir la tarea, ya existe una tarea con dicho nombre",
    ) -> None:
        super().__init__(message)


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def validate_deadline(hour: int, day: int, month: int, year: int, now: datetime | None = None) -> None:
    """Raise InvalidDateError if the deadline is past or out of range."""
    now = datetime.now() if now is None else now
    if (year, month, day, hour) < (now.year, now.month, now.day, now.hour):
        raise InvalidDateError()

    if month == 2:
        limit = 29 if _is_leap(year) else 28
    elif month in _DAYS_IN_MONTH:
        limit = _DAYS_IN_MONTH[month]
    else:
        raise InvalidDateError()
    if day < 0 or day > limit:
        raise InvalidDateError()

    if hour < 0 or hour > 24:
        raise InvalidDateError()


def compute_priority(hour: int, day: int, month: int, year: int, now: datetime | None = None) -> int:
    """Priority 1 under 72 hours away, 2 under a week, 3 otherwise."""
    now = datetime.now() if now is None else now
    try:
        target = datetime(year, month, 1) + timedelta(days=day - 1, hours=hour)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError("Error, no se ha podido convertir a hora") from exc

    hours = (target - now).total_seconds() / 3600.0
    if hours < 72:
        return 1
    if hours < 168:
        return 2
    return 3


def _parse_line(line: str) -> Task:
    name, sep, rest = line.rstrip("\n").partition(",")
    if not sep:
        raise ValueError(f"malformed task line: {line!r}")
    try:
        priority = int(rest.split()[0])
    except (IndexError, ValueError) as exc:
        raise ValueError(f"malformed task line: {line!r}") from exc
    return Task(name, priority)


def load_tasks(path: str | os.PathLike, queue: TaskQueue) -> None:
    """Add every ``name, priority`` line of the file to the queue."""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                queue.push(_parse_line(line))


def save_tasks(path: str | os.PathLike, queue: TaskQueue) -> None:
    """Write the queue to the file, one ``name, priority`` line per task."""
    with open(path, "w", encoding="utf-8") as handle:
        for task in queue:
            handle.write(f"{task.name}, {task.priority}\n")


def check_name(name: str, queue: TaskQueue) -> None:
    """Raise DuplicateTaskError if a task called ``name`` is queued."""
    if name in queue:
        raise DuplicateTaskError()