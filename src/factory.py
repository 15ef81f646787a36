"""Construction authority for Tasks and Users.

Owns the two id sequences (tasks and users count independently from 1) and
the clock used to drop past due dates. Each Factory is self-contained, so a
fresh one always starts numbering at 1.
"""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Optional

from models import (
    Task, TaskKind, User,
    normalize_due_date, normalize_title, validate_email, validate_name,
)
from notices import Notifier, NoticeKind

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class Factory:
    def __init__(self, notifier: Optional[Notifier] = None, clock: Optional[Clock] = None):
        self.notifier: Notifier = notifier if notifier is not None else Notifier()
        self.clock: Clock = clock if clock is not None else datetime.now
        self._next_task_id: int = 1
        self._next_user_id: int = 1

    # -------------------- id management --------------------
    def _allocate_task_id(self) -> int:
        nid = self._next_task_id
        self._next_task_id += 1
        return nid

    def _allocate_user_id(self) -> int:
        nid = self._next_user_id
        self._next_user_id += 1
        return nid

    # -------------------- tasks --------------------
    def _build_task(self, title: str, description: str, due_date: Optional[datetime],
                    kind: TaskKind, detail: Optional[str] = None) -> Task:
        now = self.clock()
        task = Task(
            id=self._allocate_task_id(),
            title=normalize_title(title),
            description=description,
            due_date=normalize_due_date(due_date, now),
            kind=kind,
            detail=detail,
            notifier=self.notifier,
        )
        if due_date is not None and task.due_date is None:
            logger.debug("task %d: dropped past due date %s", task.id, due_date.isoformat())
        logger.debug("created %s task %d %r", kind.value, task.id, task.title)
        return task

    def task(self, title: str, description: str, due_date: Optional[datetime] = None) -> Task:
        return self._build_task(title, description, due_date, TaskKind.PLAIN)

    def home_task(self, title: str, description: str, due_date: Optional[datetime], room: str) -> Task:
        return self._build_task(title, description, due_date, TaskKind.HOME, room)

    def work_task(self, title: str, description: str, due_date: Optional[datetime], company: str) -> Task:
        return self._build_task(title, description, due_date, TaskKind.WORK, company)

    def study_task(self, title: str, description: str, due_date: Optional[datetime], subject: str) -> Task:
        return self._build_task(title, description, due_date, TaskKind.STUDY, subject)

    # -------------------- users --------------------
    def user(self, name: str, email: str) -> User:
        """Build a user, replacing an invalid name or email with the "Invalid" sentinel."""
        stored_name, name_ok = validate_name(name)
        if not name_ok:
            self.notifier.emit(NoticeKind.INVALID_NAME, "Invalid name")
        stored_email, email_ok = validate_email(email)
        if not email_ok:
            self.notifier.emit(NoticeKind.INVALID_EMAIL, "Invalid email")
        user = User(
            id=self._allocate_user_id(),
            name=stored_name,
            email=stored_email,
            notifier=self.notifier,
        )
        logger.debug("created user %d %r", user.id, user.name)
        return user
