"""Service test fixtures: in-memory history database + FastAPI test clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_settings dependency overridden per client; overrides cleared afterwards
    - db_manager patched for background tasks that read it directly
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

import linkhop.infrastructure.database as db_module
from linkhop.config import Settings, get_settings
from linkhop.infrastructure.database import DatabaseSessionManager
from linkhop.main import app

MEMORY_DB = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_manager():
    manager = DatabaseSessionManager(MEMORY_DB)
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, aliases={"work": "gh mbinns"})


@pytest.fixture
def history_settings() -> Settings:
    return Settings(
        _env_file=None,
        aliases={"work": "gh mbinns"},
        history={"enabled": True, "database_url": MEMORY_DB, "max_entries": 100},
    )


@asynccontextmanager
async def _client_for(settings: Settings):
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(settings):
    """Test client with history disabled."""
    async with _client_for(settings) as c:
        yield c


@pytest.fixture
async def history_client(history_settings, test_manager, monkeypatch):
    """Test client with history enabled against the in-memory database."""
    monkeypatch.setattr(db_module, "db_manager", test_manager)
    async with _client_for(history_settings) as c:
        yield c
