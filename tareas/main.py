"""Command-line task manager."""

from __future__ import annotations

import sys

from .cola import TaskQueue, print_tasks
from .func import load_tasks, save_tasks
from .opciones import add_task, delete_task, view_tasks

_MENU = (
    "----------GESTOR DE TAREAS----------\n"
    "a. Añadir tarea\n"
    "b. Ver tareas pendientes\n"
    "c. Eliminar tarea\n"
    "s. Salir\n"
    "------------------------------------"
)


def _read_line() -> str:
    return input()


def _read_option() -> str:
    line = ""
    while not line.strip():
        line = _read_line()
    return line.strip()[0]


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on the given task file."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Error, modo de uso: tareas 'nombre_archivo'")
        return 1
    path = argv[0]

    queue = TaskQueue()
    try:
        load_tasks(path, queue)
    except OSError:
        print("Error, no se ha podido abrir el archivo")

    while True:
        print(_MENU)
        try:
            option = _read_option()
        except EOFError:
            break
        try:
            if option == "a":
                add_task(queue, _read_line)
            elif option == "b":
                view_tasks(queue)
            elif option == "c":
                delete_task(queue, _read_line)
            elif option == "s":
                break
        except EOFError:
            break

    print_tasks(queue)
    try:
        save_tasks(path, queue)
    except OSError:
        print("Error, no se ha podido abrir el archivo")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())