# tareas

A small interactive task manager for the terminal. Its prompts and messages
are in Spanish. Each task has a name and a deadline. The deadline sets the
task's priority:

| Priority | Deadline                  | Colour when shown |
|----------|---------------------------|-------------------|
| 1        | less than 72 hours away   | red               |
| 2        | 72 hours to 1 week away   | yellow            |
| 3        | a week or more away       | green             |

Tasks are kept in priority order. Tasks with the same priority stay in the
order they were added. The list is stored in a plain text file with one
`name, priority` line per task.

## Installation

```
pip install .
```

## Usage

```
tareas tasks.txt
```

The command takes exactly one argument, the task file. The file is read at
start-up. If it cannot be opened, an error is printed and the program starts
with an empty list. The file is written back on exit. A menu is shown:

```
----------GESTOR DE TAREAS----------
a. Añadir tarea
b. Ver tareas pendientes
c. Eliminar tarea
s. Salir
------------------------------------
```

- `a` asks for a task name and then a deadline given as `hour day month year`,
  for example `18 24 12 2030`. The task is rejected in these cases:
  - the deadline is earlier than the current hour;
  - the month is not 1 to 12, or the day is past the end of the month (leap
    years count), or the hour is not 0 to 24;
  - a task with the same name is already in the list.
- `b` prints the pending tasks in colour, most urgent first, or says there are
  none.
- `c` asks for a task name and removes that task.
- `s` prints the tasks, saves them to the file and exits. Reaching the end of
  input does the same.

Other menu letters are ignored.

## Library use

The pieces can also be used from Python:

```python
from tareas.cola import Task, TaskQueue, print_tasks
from tareas.func import compute_priority, load_tasks, save_tasks

queue = TaskQueue()
queue.push(Task("write report", 1))
queue.push(Task("plan trip", 3))
print_tasks(queue)
save_tasks("tasks.txt", queue)
```

- `tareas.cola`
  - `Task(name, priority)` is a frozen dataclass.
  - `TaskQueue` keeps tasks ordered by priority. It supports `push`, `peek`,
    `pop`, `is_empty`, `remove(name)`, `len()`, iteration and `name in queue`.
    `peek` and `pop` on an empty queue raise `EmptyQueueError`. `remove`
    raises `KeyError` when no task has that name.
  - `format_task(task)` returns the coloured `name, priority` line.
    `print_tasks(queue, out=None)` writes every task to `out`, or to standard
    output when `out` is not given.
- `tareas.func`
  - `validate_deadline(hour, day, month, year, now=None)` raises
    `InvalidDateError` for a past or out-of-range deadline.
  - `compute_priority(hour, day, month, year, now=None)` returns 1, 2 or 3.
  - `check_name(name, queue)` raises `DuplicateTaskError` if the name is
    already queued.
  - `load_tasks(path, queue)` adds the tasks of a file to a queue. Blank lines
    are skipped and a malformed line raises `ValueError`.
    `save_tasks(path, queue)` writes a queue to a file.
- `tareas.opciones` has the menu actions `add_task`, `view_tasks` and
  `delete_task`. They take the queue and, optionally, a function that reads
  one input line and a stream to write to.

## Running the tests

```
pip install .[test]
pytest
```