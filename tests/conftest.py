# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from taskapi.api.v1.tasks import get_task_service
from taskapi.core.config import Settings
from taskapi.db.repository import TaskRepository
from taskapi.db.session import init_db, make_engine
from taskapi.main import create_app
from taskapi.services.tasks import TaskService

from .fakes import FakeService, FakeTaskRepo


@pytest.fixture()
def settings() -> Settings:
    """Settings isolated from the environment and any local .env file."""
    return Settings(_env_file=None, DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def repo(engine: Engine) -> TaskRepository:
    return TaskRepository(engine)


@pytest.fixture()
def fake_repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def service(fake_repo: FakeTaskRepo) -> TaskService:
    return TaskService(fake_repo)


@pytest.fixture()
def client(settings: Settings, engine: Engine) -> Iterator[TestClient]:
    """Full stack: real router, real service, SQLite in memory."""
    app = create_app(settings, engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def fake_service() -> FakeService:
    return FakeService()


@pytest.fixture()
def handler_client(settings: Settings, engine: Engine, fake_service: FakeService) -> Iterator[TestClient]:
    """Router wired to a FakeService, for status-code mapping tests."""
    app = create_app(settings, engine=engine)
    app.dependency_overrides[get_task_service] = lambda: fake_service
    with TestClient(app) as c:
        yield c
