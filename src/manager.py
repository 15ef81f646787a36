"""TaskManager: the global registry of users and tasks, plus queries.

Both registries are append-only. Listing and search operations return the
lines to print; find_tasks()/tasks_with_status() are the underlying queries.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from models import Task, TaskStatus, User
from notices import Notifier, NoticeKind
from render import heading, task_block, user_lines
from theme import color, EMPTY_COLOR

logger = logging.getLogger(__name__)

NO_TASKS = "No tasks available."
NO_USERS = "No users available."
NO_RESULTS = "No results found."


class TaskManager:
    def __init__(self, notifier: Optional[Notifier] = None):
        self.users: List[User] = []
        self.tasks: List[Task] = []
        self.notifier: Optional[Notifier] = notifier

    # -------------------- registration --------------------
    def register_user(self, user: User) -> None:
        self.users.append(user)
        self._notify(NoticeKind.USER_REGISTERED, f"User '{user.name}' added successfully.")

    def register_task(self, task: Task) -> None:
        self.tasks.append(task)
        self._notify(NoticeKind.TASK_REGISTERED, f"Task '{task.title}' added to system.")

    # -------------------- queries --------------------
    def find_tasks(self, term: str) -> List[Task]:
        """Tasks whose title contains `term`, ignoring case. An empty term matches all."""
        needle = term.lower()
        return [t for t in self.tasks if needle in t.title.lower()]

    def tasks_with_status(self, status: TaskStatus) -> List[Task]:
        return [t for t in self.tasks if t.status is status]

    def status_counts(self) -> Dict[TaskStatus, int]:
        counts = {status: 0 for status in TaskStatus}
        for task in self.tasks:
            counts[task.status] += 1
        return counts

    # -------------------- reports --------------------
    def list_all_tasks(self) -> List[str]:
        if not self.tasks:
            return [color(NO_TASKS, EMPTY_COLOR)]
        return self._task_report("All Tasks", self.tasks)

    def search_tasks(self, term: str) -> List[str]:
        results = self.find_tasks(term)
        logger.debug("search %r matched %d of %d tasks", term, len(results), len(self.tasks))
        if not results:
            return [color(NO_RESULTS, EMPTY_COLOR)]
        return self._task_report(f"Search Results for '{term}'", results)

    def search_by_status(self, status: TaskStatus) -> List[str]:
        results = self.tasks_with_status(status)
        if not results:
            return [color(NO_RESULTS, EMPTY_COLOR)]
        return self._task_report(f"Tasks with Status: {status.value}", results)

    def list_all_users(self) -> List[str]:
        if not self.users:
            return [color(NO_USERS, EMPTY_COLOR)]
        lines = heading("All Users")
        for user in self.users:
            lines.extend(user_lines(user))
        return lines

    @staticmethod
    def _task_report(title: str, tasks: List[Task]) -> List[str]:
        lines = heading(title)
        for task in tasks:
            lines.extend(task_block(task))
        return lines

    def _notify(self, kind: NoticeKind, message: str) -> None:
        if self.notifier is not None:
            self.notifier.emit(kind, message)

    def __str__(self) -> str:
        counts = self.status_counts()
        return ', '.join(f'{status.value}: {n} tasks' for status, n in counts.items())
