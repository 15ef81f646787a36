"""Data models for the task manager: Task (with its category kinds) and User.

A Task is a single dataclass tagged with a TaskKind. Home, Work and Study
tasks carry one extra string in `detail` (room, company, subject); Plain
tasks carry none. Validation rules live in the normalize_/validate_ helpers
so they can be checked without building entities.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from notices import Notifier, NoticeKind

NO_TITLE = "NO Title"
INVALID = "Invalid"
NO_DUE_DATE = "No due date"
MIN_NAME_LENGTH = 3


class TaskStatus(str, Enum):
    """Task lifecycle status.

    InProgress is declared but no public operation sets it; tasks go
    straight from Pending to Done.
    """
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    def __str__(self) -> str:
        return self.value


class TaskKind(str, Enum):
    PLAIN = "Plain"
    HOME = "Home"
    WORK = "Work"
    STUDY = "Study"


# -------------------- validation helpers --------------------
def normalize_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        return NO_TITLE
    return title


def normalize_due_date(due_date: Optional[datetime], now: datetime) -> Optional[datetime]:
    """Drop due dates strictly before `now`.

    Naive values are local time; when exactly one side is timezone-aware,
    `now` is converted so the two compare.
    """
    if due_date is None:
        return None
    if due_date.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone(due_date.tzinfo)
    elif due_date.tzinfo is None and now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)
    if due_date < now:
        return None
    return due_date


def validate_name(name: str) -> Tuple[str, bool]:
    if len(name) < MIN_NAME_LENGTH:
        return INVALID, False
    return name, True


def validate_email(email: str) -> Tuple[str, bool]:
    if "@" not in email or "." not in email:
        return INVALID, False
    return email, True


@dataclass
class Task:
    """A single task.

    Fields:
        id: Unique integer id handed out by the Factory.
        title: Display title, never blank (see NO_TITLE).
        description: Free text.
        due_date: None when absent or when it was already past at creation.
        status: Pending until mark_done() moves it to Done.
        kind: Category discriminant.
        detail: Room / company / subject for Home / Work / Study tasks.
    """
    id: int
    title: str
    description: str = ""
    due_date: Optional[datetime] = None
    status: TaskStatus = TaskStatus.PENDING
    kind: TaskKind = TaskKind.PLAIN
    detail: Optional[str] = None
    notifier: Optional[Notifier] = field(default=None, repr=False, compare=False)

    @property
    def room(self) -> Optional[str]:
        return self.detail if self.kind is TaskKind.HOME else None

    @property
    def company(self) -> Optional[str]:
        return self.detail if self.kind is TaskKind.WORK else None

    @property
    def subject(self) -> Optional[str]:
        return self.detail if self.kind is TaskKind.STUDY else None

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE

    def mark_done(self) -> bool:
        """Move the task to Done. Returns False (and changes nothing) if it already is."""
        if self.is_done:
            self._notify(NoticeKind.TASK_ALREADY_DONE, "Task is already done.")
            return False
        self.status = TaskStatus.DONE
        self._notify(NoticeKind.TASK_DONE, f"Task '{self.title}' marked as done.")
        return True

    def formatted_due_date(self) -> str:
        if self.due_date is None:
            return NO_DUE_DATE
        d = self.due_date
        return f"{d.day} - {d.month} - {d.year}"

    def _notify(self, kind: NoticeKind, message: str) -> None:
        if self.notifier is not None:
            self.notifier.emit(kind, message)


@dataclass
class User:
    """A user owning an ordered list of task references.

    The list is an association only: removing a task here leaves it in the
    TaskManager registry.
    """
    id: int
    name: str
    email: str
    tasks: List[Task] = field(default_factory=list)
    notifier: Optional[Notifier] = field(default=None, repr=False, compare=False)

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)
        self._notify(NoticeKind.TASK_ASSIGNED, f"Task '{task.title}' added to user {self.name}.")

    def remove_task(self, task_id: int) -> Optional[Task]:
        for idx, task in enumerate(self.tasks):
            if task.id == task_id:
                del self.tasks[idx]
                self._notify(NoticeKind.TASK_UNASSIGNED, f"Task ID {task_id} removed.")
                return task
        self._notify(NoticeKind.TASK_NOT_FOUND, f"Task ID {task_id} not found.")
        return None

    def active_tasks(self) -> List[Task]:
        return [t for t in self.tasks if not t.is_done]

    def _notify(self, kind: NoticeKind, message: str) -> None:
        if self.notifier is not None:
            self.notifier.emit(kind, message)
