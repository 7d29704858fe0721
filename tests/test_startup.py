"""Startup sequence tests: the service must not come up half-initialized."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.core import StartupException
from src.infrastructure.database import Database, init_database
from src.main import create_app


def _unreachable_settings() -> Settings:
    # Nothing listens on port 1
    return Settings(
        _env_file=None,
        db_host="127.0.0.1",
        db_port="1",
        db_user="todo",
        db_password="todo",
        db_name="todos",
    )


@pytest.mark.asyncio
async def test_init_database_fails_fast_when_unreachable():
    with pytest.raises(StartupException) as exc_info:
        await init_database(_unreachable_settings())

    assert exc_info.value.step == "connect"


@pytest.mark.asyncio
async def test_init_database_rejects_unparseable_url():
    settings = Settings(_env_file=None, database_url="not a database url")

    with pytest.raises(StartupException) as exc_info:
        await init_database(settings)

    assert exc_info.value.step == "configure"


def test_lifespan_aborts_when_database_unreachable():
    app = create_app(_unreachable_settings())

    with pytest.raises(StartupException):
        with TestClient(app):
            pass


@pytest.mark.asyncio
async def test_database_connect_and_ping(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'ping.db'}")
    try:
        await database.connect()
        assert await database.ping() is True
    finally:
        await database.close()


@pytest.mark.asyncio
async def test_init_database_wraps_connect_timeout(monkeypatch):
    closed = []

    async def timed_out(self):
        raise asyncio.TimeoutError()

    async def record_close(self):
        closed.append(True)

    monkeypatch.setattr(Database, "connect", timed_out)
    monkeypatch.setattr(Database, "close", record_close)

    with pytest.raises(StartupException) as exc_info:
        await init_database(_unreachable_settings())

    assert exc_info.value.step == "connect"
    assert closed == [True]


@pytest.mark.asyncio
async def test_ping_reports_timeout(tmp_path, monkeypatch):
    async def timed_out(self):
        raise asyncio.TimeoutError()

    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'ping.db'}")
    monkeypatch.setattr(Database, "connect", timed_out)
    try:
        assert await database.ping() is False
    finally:
        await database.close()


@pytest.mark.asyncio
async def test_ping_reports_failure(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'ping.db'}")
    try:
        assert await database.ping() is False
    finally:
        await database.close()
