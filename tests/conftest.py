"""Pytest configuration and fixtures for the task tracker.

Uses app.main:app for HTTP tests and app.infrastructure.persistence.database
for DB-dependent fixtures. Every DB test gets a fresh SQLite file under
tmp_path, so tests never share rows.
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.limiter import limiter
from app.infrastructure.persistence import database
from app.main import app


@pytest.fixture
async def sqlite_db(tmp_path, monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[None]:
    """Point the app at a fresh SQLite database with the task table created."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    get_settings.cache_clear()
    await database.dispose_engine()
    await database.create_all()
    yield
    await database.dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def db_session(sqlite_db: None) -> AsyncIterator[AsyncSession]:
    """Database session for repository tests. Commits are not needed; flush is enough."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(
    sqlite_db: None, monkeypatch: pytest.MonkeyPatch
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), rate limiting off."""
    monkeypatch.setattr(limiter, "enabled", False)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
