"""Database utilities for testing.

This module provides helper functions for creating and dropping the
schema of the test entities.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from entitybase.db.session import Base

# Import all models to ensure they are registered with Base.metadata
# This allows Base.metadata.create_all() and Base.metadata.drop_all() to work properly
from tests.utils import entities  # noqa: F401


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create all tables from SQLAlchemy metadata.

    Args:
        engine: SQLAlchemy async engine
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop all tables from SQLAlchemy metadata.

    Args:
        engine: SQLAlchemy async engine
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
