"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- Test settings pointing at a throwaway SQLite database
- SQLAlchemy engine and session management
- Environment overrides for cached settings
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from entitybase.core.settings import Settings, get_settings
from tests.utils.database import create_all_tables, drop_all_tables


@pytest.fixture(scope="function")
def test_settings(tmp_path: Path) -> Settings:
    """Provide test settings backed by a SQLite file in a temp directory."""
    return Settings(
        testing=True,
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'entities.db'}",
    )


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Let a test override settings through environment variables.

    The cached settings are dropped before and after the test so the
    overrides are picked up and do not leak.
    """
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()


@pytest_asyncio.fixture(scope="function")
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Provide SQLAlchemy async engine with the test schema created.

    Creates a fresh engine for each test to avoid event loop issues.
    """
    engine = create_async_engine(test_settings.database_url, echo=False)
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Provide a session factory for tests that need several sessions."""
    return async_sessionmaker(async_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for each test.

    After the test, rolls back any uncommitted changes.
    """
    async with AsyncSession(async_engine, expire_on_commit=False) as session:
        yield session
        await session.rollback()
