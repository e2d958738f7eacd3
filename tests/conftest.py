from __future__ import annotations

from datetime import datetime, timezone

import pytest

from visitor_log import create_app
from visitor_log.database.bootstrap import apply_schema
from visitor_log.database.connection import DBConfig, DatabaseConnection


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 8, 15, 30, 250000, tzinfo=timezone.utc)


@pytest.fixture
def db_path(tmp_path) -> str:
    path = str(tmp_path / "visits.db")
    apply_schema(path)
    return path


@pytest.fixture
def conn(db_path) -> DatabaseConnection:
    return DatabaseConnection(DBConfig(path=db_path))


@pytest.fixture
def app(db_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DB_PATH": db_path})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
