# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.app.main import create_app
from task_tracker.infra.db.task_repo_memory import InMemoryTaskRepo
from task_tracker.services.task_service import TaskService

from .fakes import FixedClock

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep JSON logs out of the working tree."""
    path = tmp_path / "logs"
    monkeypatch.setenv("LOG_DIR", str(path))
    return path


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def repo(clock: FixedClock) -> InMemoryTaskRepo:
    return InMemoryTaskRepo(clock=clock)


@pytest.fixture()
def service(repo: InMemoryTaskRepo) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def client(repo: InMemoryTaskRepo):
    """
    Fresh application and store per test.

    raise_server_exceptions=False so 500 responses can be asserted on.
    """
    app = create_app(repo=repo)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
