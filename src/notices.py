"""Notices: human-readable reports of locally handled conditions.

Entities never print. They publish a Notice through a Notifier and callers
decide whether to subscribe (the demo echoes them, tests record them).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)


class NoticeKind(str, Enum):
    INVALID_NAME = "invalid-name"
    INVALID_EMAIL = "invalid-email"
    TASK_DONE = "task-done"
    TASK_ALREADY_DONE = "task-already-done"
    TASK_ASSIGNED = "task-assigned"
    TASK_UNASSIGNED = "task-unassigned"
    TASK_NOT_FOUND = "task-not-found"
    USER_REGISTERED = "user-registered"
    TASK_REGISTERED = "task-registered"


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    message: str

    def __str__(self) -> str:
        return self.message


Listener = Callable[[Notice], None]


class Notifier:
    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, kind: NoticeKind, message: str) -> Notice:
        """Build a notice, log it and hand it to every listener in order."""
        notice = Notice(kind, message)
        logger.debug("notice %s: %s", kind.value, message)
        for listener in list(self._listeners):
            listener(notice)
        return notice
