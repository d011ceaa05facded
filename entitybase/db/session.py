"""SQLAlchemy database session management.

This module provides the declarative base shared by every entity and the
async engine/session factory used to persist them.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from entitybase.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all database models.

    ``AsyncAttrs`` exposes ``awaitable_attrs`` so expired attributes can be
    loaded explicitly under asyncio before they are touched.
    """


# Global engine and session factory
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def init_db_session(settings: Settings | None = None) -> None:
    """Initialize the engine and session factory."""
    global _engine, _async_session_maker

    if _async_session_maker is not None:
        return  # Already initialized

    settings = settings or get_settings()

    _engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )

    _async_session_maker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info("Database session factory initialized for %s", _engine.url)


def get_engine() -> AsyncEngine:
    """Get the async engine, initializing it on first use."""
    if _engine is None:
        init_db_session()

    if _engine is None:
        raise RuntimeError("Failed to initialize database engine")

    return _engine


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if _async_session_maker is None:
        init_db_session()

    if _async_session_maker is None:
        raise RuntimeError("Failed to initialize database session")

    async with _async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


async def close_db_session() -> None:
    """Dispose the engine and reset the session factory."""
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")

    _engine = None
    _async_session_maker = None
