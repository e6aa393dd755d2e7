"""
Database Engine and Session Factory

This module turns a DATABASE_URL into a configured async engine and session
factory. Uses the database abstraction layer to support different backends.

Key Features:
- URL normalization: plain postgres:// and sqlite:/// URLs are mapped to the
  async drivers (asyncpg, aiosqlite)
- Adapter selection by URL scheme
- Sessions do not expire objects on commit, so rows can be returned to the
  route layer after the transaction ends
"""

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from studio.db.interface import DatabaseAdapter
from studio.db.postgres_adapter import PostgreSQLAdapter
from studio.db.sqlite_adapter import SQLiteAdapter

_ASYNC_DRIVER_PREFIXES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


def normalize_database_url(database_url: str) -> str:
    """
    Rewrite a database URL to use an async driver.

    URLs that already name a driver (``postgresql+asyncpg://``) are returned
    unchanged.

    Example:
        normalize_database_url("postgres://u:p@db/site")
            -> "postgresql+asyncpg://u:p@db/site"
    """
    for prefix, async_prefix in _ASYNC_DRIVER_PREFIXES.items():
        if database_url.startswith(prefix):
            return async_prefix + database_url[len(prefix):]
    return database_url


def get_database_adapter(database_url: str) -> DatabaseAdapter:
    """
    Factory function to get the database adapter for a URL.

    Args:
        database_url: Normalized (async driver) connection string

    Returns:
        DatabaseAdapter instance

    Raises:
        ValueError: If the URL names an unsupported database
    """
    if database_url.startswith("sqlite"):
        return SQLiteAdapter()
    if database_url.startswith("postgresql"):
        return PostgreSQLAdapter()
    raise ValueError(f"Unsupported database URL scheme: {database_url.split(':', 1)[0]}")


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    """Create the async session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,  # Rows stay readable after commit
        autoflush=False,
    )
