# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tuido.models import Session, Task
from tuido.storage import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def make_session() -> Callable[..., Session]:
    """Build a session from (title, done) pairs with ids 1..n."""

    def _make(*items: tuple, cursor: int = 0) -> Session:
        tasks = [Task(id=i, title=title, done=done) for i, (title, done) in enumerate(items, start=1)]
        session = Session.start(tasks)
        session.cursor = cursor
        return session

    return _make
