"""Database engine and session management."""

from .session import (
    Base,
    close_db_session,
    get_db_session,
    get_engine,
    init_db_session,
)

__all__ = [
    "Base",
    "init_db_session",
    "get_engine",
    "get_db_session",
    "close_db_session",
]
