"""The fixed demonstration sequence.

Builds two users and four tasks, then walks through listing, marking done,
searching, active-task lookup and removal. Every line, notices included,
goes through `echo` in the order it happens.
"""
from __future__ import annotations
import logging
from datetime import timedelta
from typing import Callable, Iterable, Optional

from factory import Factory
from manager import TaskManager
from models import TaskStatus
from notices import Notice
from render import heading, task_block
from theme import color, HEADER_COLOR

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def _emit_lines(echo: Echo, lines: Iterable[str]) -> None:
    for line in lines:
        echo(line)


def run_demo(echo: Echo = print, factory: Optional[Factory] = None) -> TaskManager:
    factory = factory if factory is not None else Factory()

    def on_notice(notice: Notice) -> None:
        echo(notice.message)

    factory.notifier.subscribe(on_notice)
    try:
        manager = TaskManager(factory.notifier)
        now = factory.clock()

        echo(color("=== Smart Task Manager System ===", HEADER_COLOR))
        echo("")

        user1 = factory.user("John Doe", "john@example.com")
        user2 = factory.user("Al", "invalid-email")
        manager.register_user(user1)
        manager.register_user(user2)

        task1 = factory.task("Buy groceries", "Get milk and bread", now + timedelta(days=2))
        task2 = factory.home_task("Clean kitchen", "Deep clean", now + timedelta(days=1), "Kitchen")
        task3 = factory.work_task("Finish report", "Q4 report", now + timedelta(days=5), "TechCorp")
        task4 = factory.study_task("Study OOP", "Learn inheritance", now + timedelta(days=3), "Computer Science")
        for task in (task1, task2, task3, task4):
            manager.register_task(task)

        user1.add_task(task1)
        user1.add_task(task2)
        user1.add_task(task3)

        _emit_lines(echo, manager.list_all_tasks())

        _emit_lines(echo, heading("Marking Task as Done"))
        task1.mark_done()

        _emit_lines(echo, heading("Search Feature"))
        _emit_lines(echo, manager.search_tasks("clean"))
        _emit_lines(echo, manager.search_by_status(TaskStatus.PENDING))

        _emit_lines(echo, heading("Active Tasks for User"))
        active = user1.active_tasks()
        echo(f"User {user1.name} has {len(active)} active tasks:")
        for task in active:
            _emit_lines(echo, task_block(task))

        _emit_lines(echo, heading("Remove Task"))
        user1.remove_task(task2.id)

        _emit_lines(echo, manager.list_all_users())

        _emit_lines(echo, heading("Program Complete"))
    finally:
        factory.notifier.unsubscribe(on_notice)

    logger.info("demo finished: %s", manager)
    return manager
