# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from typing import List

import pytest

import theme
from factory import Factory
from manager import TaskManager
from notices import Notice, Notifier

NOW = datetime(2026, 1, 10, 12, 0, 0)


@pytest.fixture(autouse=True)
def plain_output():
    """Disable ANSI colors so rendered lines compare as plain text."""
    previous = theme.is_enabled()
    theme.set_enabled(False)
    yield
    theme.set_enabled(previous)


@pytest.fixture()
def notices() -> List[Notice]:
    return []


@pytest.fixture()
def notifier(notices: List[Notice]) -> Notifier:
    n = Notifier()
    n.subscribe(notices.append)
    return n


@pytest.fixture()
def factory(notifier: Notifier) -> Factory:
    """Factory with a fixed clock so due-date checks are deterministic."""
    return Factory(notifier=notifier, clock=lambda: NOW)


@pytest.fixture()
def manager(notifier: Notifier) -> TaskManager:
    return TaskManager(notifier)


@pytest.fixture()
def now() -> datetime:
    return NOW
