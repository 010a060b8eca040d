"""Task formatting for API responses and CLI display."""

from taskboard.core.models import Task
from taskboard.keyword.format import format_date, keyword_resource


def task_resource(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "is_done": task.is_done,
        "created_at": format_date(task.created_at),
        "updated_at": format_date(task.updated_at),
        "keywords": [keyword_resource(k) for k in task.keywords],
    }


def format_task_list(tasks: list[Task]) -> str:
    """One line per task: id, checkbox, title, keyword names."""
    if not tasks:
        return "No tasks"

    lines = []
    for task in tasks:
        mark = "x" if task.is_done else " "
        tags = f" #{' #'.join(k.name for k in task.keywords)}" if task.keywords else ""
        lines.append(f"[{task.id}] [{mark}] {task.title}{tags}")

    return "\n".join(lines)
