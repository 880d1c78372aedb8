import io

import pytest

from tareas.cola import EmptyQueueError, Task, TaskQueue, format_task, print_tasks


def test_push_orders_by_priority_keeping_insertion_order():
    queue = TaskQueue()
    for task in [Task("A", 3), Task("B", 1), Task("C", 2), Task("D", 1)]:
        queue.push(task)
    assert [t.name for t in queue] == ["B", "D", "C", "A"]


def test_peek_does_not_remove_and_pop_does():
    queue = TaskQueue([Task("x", 2), Task("y", 1)])
    assert queue.peek() == Task("y", 1)
    assert len(queue) == 2
    assert queue.pop() == Task("y", 1)
    assert queue.pop() == Task("x", 2)
    assert queue.is_empty()


def test_empty_queue_errors():
    queue = TaskQueue()
    with pytest.raises(EmptyQueueError):
        queue.peek()
    with pytest.raises(EmptyQueueError):
        queue.pop()


def test_contains_and_remove():
    queue = TaskQueue([Task("x", 2), Task("y", 1)])
    assert "x" in queue
    assert queue.remove("x") == Task("x", 2)
    assert "x" not in queue
    assert len(queue) == 1


def test_remove_missing_raises_key_error():
    queue = TaskQueue([Task("x", 2)])
    with pytest.raises(KeyError):
        queue.remove("z")
    assert len(queue) == 1


@pytest.mark.parametrize(
    "priority, colour",
    [(1, "\033[41;37m"), (2, "\033[43;37m"), (3, "\033[42;37m")],
)
def test_format_task_colours(priority, colour):
    assert format_task(Task("T", priority)) == f"{colour}T, {priority}\033[0m"


def test_print_tasks_writes_all_and_keeps_queue():
    queue = TaskQueue([Task("b", 2), Task("a", 1)])
    out = io.StringIO()
    print_tasks(queue, out)
    lines = out.getvalue().splitlines()
    assert lines == [format_task(Task("a", 1)), format_task(Task("b", 2))]
    assert len(queue) == 2