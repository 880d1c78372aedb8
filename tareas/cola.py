"""Priority queue of pending tasks."""

from __future__ import annotations

import sys
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, TextIO

_RESET = "\033[0m"
_COLOURS = {1: "\033[41;37m", 2: "\033[43;37m"}
_DEFAULT_COLOUR = "\033[42;37m"


@dataclass(frozen=True)
class Task:
    """A named task with a priority; lower numbers are more urgent."""

    name: str
    priority: int


class EmptyQueueError(IndexError):
    """Raised when reading from a queue that holds no tasks."""

    def __init__(self, message: str = "ERROR, la cola no tiene elementos") -> None:
        super().__init__(message)


class TaskQueue:
    """Tasks ordered by priority; equal priorities keep insertion order."""

    def __init__(self, tasks=()) -> None:
        self._items: list[Task] = []
        for task in tasks:
            self.push(task)

    def push(self, task: Task) -> None:
        """Insert a task after every task of the same or lower priority value."""
        index = bisect_right(self._items, task.priority, key=lambda t: t.priority)
        self._items.insert(index, task)

    def peek(self) -> Task:
        """Return the most urgent task without removing it."""
        if not self._items:
            raise EmptyQueueError()
        return self._items[0]

    def pop(self) -> Task:
        """Remove and return the most urgent task."""
        if not self._items:
            raise EmptyQueueError()
        return self._items.pop(0)

    def is_empty(self) -> bool:
        return not self._items

    def remove(self, name: str) -> Task:
        """Remove the first task called ``name``; raise KeyError if absent."""
        for index, task in enumerate(self._items):
            if task.name == name:
                return self._items.pop(index)
        raise KeyError(name)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return any(task.name == name for task in self._items)


def format_task(task: Task) -> str:
    """Render a task as a coloured ``name, priority`` line."""
    colour = _COLOURS.get(task.priority, _DEFAULT_COLOUR)
    return f"{colour}{task.name}, {task.priority}{_RESET}"


def print_tasks(queue: TaskQueue, out: TextIO | None = None) -> None:
    """Write every task of the queue, most urgent first."""
    stream = sys.stdout if out is None else out
    for task in queue:
        stream.write(format_task(task) + "\n")