# tests/test_manager.py

from __future__ import annotations

from datetime import timedelta

import theme
from manager import NO_RESULTS, NO_TASKS, NO_USERS, TaskManager
from models import TaskStatus


def _populate(factory, manager, now):
    tasks = [
        factory.task("Buy groceries", "Get milk and bread", now + timedelta(days=2)),
        factory.home_task("Clean kitchen", "Deep clean", now + timedelta(days=1), "Kitchen"),
        factory.work_task("Finish report", "clean up the Q4 numbers", None, "TechCorp"),
    ]
    for t in tasks:
        manager.register_task(t)
    return tasks


def test_empty_manager_reports() -> None:
    manager = TaskManager()
    assert manager.list_all_tasks() == [NO_TASKS]
    assert manager.list_all_users() == [NO_USERS]
    assert manager.search_tasks("x") == [NO_RESULTS]
    assert manager.search_by_status(TaskStatus.PENDING) == [NO_RESULTS]


def test_register_emits_notices(factory, manager, notices) -> None:
    user = factory.user("John Doe", "john@example.com")
    task = factory.task("Buy groceries", "")
    manager.register_user(user)
    manager.register_task(task)

    assert manager.users == [user]
    assert manager.tasks == [task]
    assert [n.message for n in notices[-2:]] == [
        "User 'John Doe' added successfully.",
        "Task 'Buy groceries' added to system.",
    ]


def test_list_all_tasks_in_registration_order(factory, manager, now) -> None:
    _populate(factory, manager, now)
    lines = manager.list_all_tasks()

    assert lines[:2] == ["", "=== All Tasks ==="]
    assert lines.count("---") == 3
    assert [l for l in lines if l.startswith("ID:")] == [
        "ID: 1 | Title: Buy groceries | Status: Pending | Due: 12 - 1 - 2026",
        "ID: 2 | Title: Clean kitchen | Status: Pending | Due: 11 - 1 - 2026",
        "ID: 3 | Title: Finish report | Status: Pending | Due: No due date",
    ]


def test_search_is_case_insensitive_on_title_only(factory, manager, now) -> None:
    _populate(factory, manager, now)

    assert [t.title for t in manager.find_tasks("clean")] == ["Clean kitchen"]
    assert [t.title for t in manager.find_tasks("REPORT")] == ["Finish report"]

    lines = manager.search_tasks("clean")
    assert lines[1] == "=== Search Results for 'clean' ==="
    assert "Room: Kitchen" in lines


def test_empty_search_term_matches_everything(factory, manager, now) -> None:
    tasks = _populate(factory, manager, now)
    assert manager.find_tasks("") == tasks


def test_search_without_match(factory, manager, now) -> None:
    _populate(factory, manager, now)
    assert manager.search_tasks("vacuum") == [NO_RESULTS]


def test_search_by_status(factory, manager, now) -> None:
    tasks = _populate(factory, manager, now)

    assert manager.search_by_status(TaskStatus.DONE) == [NO_RESULTS]

    tasks[1].mark_done()
    assert manager.tasks_with_status(TaskStatus.DONE) == [tasks[1]]
    assert manager.tasks_with_status(TaskStatus.PENDING) == [tasks[0], tasks[2]]

    lines = manager.search_by_status(TaskStatus.DONE)
    assert lines[1] == "=== Tasks with Status: Done ==="
    assert lines[2] == "ID: 2 | Title: Clean kitchen | Status: Done | Due: 11 - 1 - 2026"


def test_list_all_users(factory, manager) -> None:
    john = factory.user("John Doe", "john@example.com")
    al = factory.user("Al", "invalid-email")
    manager.register_user(john)
    manager.register_user(al)
    john.add_task(factory.task("Buy groceries", ""))

    assert manager.list_all_users() == [
        "", "=== All Users ===",
        "", "User ID: 1 | Name: John Doe | Email: john@example.com", "Total Tasks: 1",
        "", "User ID: 2 | Name: Invalid | Email: Invalid", "Total Tasks: 0",
    ]


def test_status_summary(factory, manager, now) -> None:
    tasks = _populate(factory, manager, now)
    tasks[0].mark_done()

    assert manager.status_counts() == {
        TaskStatus.PENDING: 2, TaskStatus.IN_PROGRESS: 0, TaskStatus.DONE: 1,
    }
    assert str(manager) == "Pending: 2 tasks, InProgress: 0 tasks, Done: 1 tasks"


def test_empty_reports_are_dimmed_when_colored() -> None:
    theme.set_enabled(True)
    lines = TaskManager().list_all_tasks()
    assert lines == [theme.EMPTY_COLOR + NO_TASKS + theme.RESET]
    assert theme.strip_ansi(lines[0]) == NO_TASKS
