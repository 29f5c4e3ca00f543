# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.db import InMemoryTaskRepository
from taskboard.gateway import TaskGateway
from taskboard.main import create_app

from .fakes import FakeClock

ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Explicit settings so tests never depend on the real environment."""
    return Settings(
        host="127.0.0.1",
        port=5050,
        allowed_origins=[ALLOWED_ORIGIN],
        store="memory",
        db_path=tmp_path / "tasks.sqlite3",
        mongo_url="mongodb://localhost:27017",
        mongo_db="taskboard_test",
        log_level="DEBUG",
        log_dir=None,
        api_url="http://testserver",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def gateway(repository: InMemoryTaskRepository, clock: FakeClock) -> TaskGateway:
    return TaskGateway(repository, clock=clock)


@pytest.fixture()
def client(settings: Settings, repository: InMemoryTaskRepository, clock: FakeClock):
    """TestClient over an app whose gateway uses the deterministic clock."""
    app = create_app(settings, repository)
    app.state.gateway.clock = clock
    with TestClient(app) as c:
        yield c
