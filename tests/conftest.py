"""Shared fixtures: a throwaway SQLite database and an app client."""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

# Settings are read at import time, so the environment goes first.
_DB_DIR = Path(tempfile.mkdtemp(prefix="goal-tracker-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"
os.environ["CRON_SECRET"] = "test-cron-secret"
os.environ["APP_PASSWORD"] = ""
os.environ["RESEND_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from goal_tracker.database import Base, engine
from goal_tracker.main import app
from goal_tracker.models import goal, reminder  # noqa: F401
from goal_tracker.services.notifier import get_notifier


async def _reset_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


class FakeNotifier:
    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.sent: list[tuple[str, list[str]]] = []
        self.configured = True

    def send_reminder(self, to, goals) -> bool:
        self.sent.append((to, [g.name for g in goals]))
        return self.succeed

    def close(self) -> None:
        pass


@pytest.fixture
def fresh_db() -> None:
    asyncio.run(_reset_schema())


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def client(fresh_db, notifier):
    app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
