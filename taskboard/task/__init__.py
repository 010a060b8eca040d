"""Task primitive: units of work with a done flag."""

from .operations import create_task, get_task, list_tasks, toggle_task

__all__ = [
    "create_task",
    "get_task",
    "list_tasks",
    "toggle_task",
]
