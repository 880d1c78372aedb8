"""Interactive menu actions."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, TextIO

from .cola import Task, TaskQueue, print_tasks
from .func import (
    DuplicateTaskError,
    InvalidDateError,
    check_name,
    compute_priority,
    validate_deadline,
)


def _read_nonblank(read_line: Callable[[], str]) -> str:
    line = read_line()
    while not line.strip():
        line = read_line()
    return line.strip()


def _read_ints(read_line: Callable[[], str], count: int) -> list[int] | None:
    tokens: list[str] = []
    while len(tokens) < count:
        tokens.extend(read_line().split())
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError:
        return None


def add_task(
    queue: TaskQueue,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
    now: datetime | None = None,
) -> Task | None:
    """Ask for a name and deadline and queue the task; return it if added."""
    read_line = input if read_line is None else read_line
    out = sys.stdout if out is None else out

    print("Escriba el nombre de la tarea: ", file=out)
    name = _read_nonblank(read_line)
    print("Escriba la fecha límite para la tarea (h, d, m, a): ", file=out)
    values = _read_ints(read_line, 4)
    if values is None:
        print(InvalidDateError(), file=out)
        return None
    hour, day, month, year = values

    try:
        validate_deadline(hour, day, month, year, now)
        check_name(name, queue)
        priority = compute_priority(hour, day, month, year, now)
    except (InvalidDateError, DuplicateTaskError) as exc:
        print(exc, file=out)
        return None

    task = Task(name, priority)
    queue.push(task)
    print("Tarea añadida", file=out)
    return task


def view_tasks(queue: TaskQueue, out: TextIO | None = None) -> None:
    """Show pending tasks, or say there are none."""
    out = sys.stdout if out is None else out
    if queue.is_empty():
        print("No hay tareas pendientes", file=out)
    else:
        print_tasks(queue, out)


def delete_task(
    queue: TaskQueue,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> bool:
    """Ask for a task name and remove it; return whether it was removed."""
    read_line = input if read_line is None else read_line
    out = sys.stdout if out is None else out
    if queue.is_empty():
        print("Error, no hay tareas pendientes", file=out)
        return False

    print("Escriba el nombre de la tarea a eliminar: ", file=out)
    name = _read_nonblank(read_line)
    try:
        queue.remove(name)
    except KeyError:
        print("Error, no se ha encontrado la tarea a eliminar", file=out)
        return False
    print("Tarea eliminada", file=out)
    return True