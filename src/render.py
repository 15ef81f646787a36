"""Text rendering for tasks and users.

Each function returns the display lines for one entity. The common task
block is shared; a categorized task gets exactly one extra labeled line,
chosen from DETAIL_LABELS by its kind.
"""
from typing import Dict, List

from models import Task, TaskKind, User
from theme import color, HEADER_COLOR, ID_COLOR, STATUS_COLOR

DETAIL_LABELS: Dict[TaskKind, str] = {
    TaskKind.HOME: "Room",
    TaskKind.WORK: "Company",
    TaskKind.STUDY: "Subject",
}
DIVIDER = "---"


def task_lines(task: Task) -> List[str]:
    status_text = color(task.status.value, STATUS_COLOR.get(task.status.value, ''))
    lines = [
        f"ID: {color(str(task.id), ID_COLOR)} | Title: {task.title} | "
        f"Status: {status_text} | Due: {task.formatted_due_date()}",
        f"Description: {task.description}",
    ]
    label = DETAIL_LABELS.get(task.kind)
    if label is not None:
        lines.append(f"{label}: {task.detail}")
    return lines


def task_block(task: Task) -> List[str]:
    """Task lines followed by the divider, as used in every listing."""
    return task_lines(task) + [DIVIDER]


def user_lines(user: User) -> List[str]:
    return [
        "",
        f"User ID: {color(str(user.id), ID_COLOR)} | Name: {user.name} | Email: {user.email}",
        f"Total Tasks: {len(user.tasks)}",
    ]


def heading(title: str) -> List[str]:
    """Blank spacer line plus a `=== title ===` banner."""
    return ["", color(f"=== {title} ===", HEADER_COLOR)]
