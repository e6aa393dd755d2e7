"""
PostgreSQL Database Adapter

This module implements the DatabaseAdapter interface for PostgreSQL via asyncpg.
Used for production deployments where the site content lives in a managed
PostgreSQL instance.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import Pool

from studio.db.interface import DatabaseAdapter


class PostgreSQLAdapter(DatabaseAdapter):
    """
    PostgreSQL database adapter implementation.

    Uses SQLAlchemy's default async queue pool. pool_pre_ping discards
    connections dropped by the server (common with serverless PostgreSQL)
    before a request uses them.
    """

    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        engine_kwargs = self.get_engine_kwargs()
        engine_kwargs.update(kwargs)

        return create_async_engine(
            database_url,
            connect_args=self.get_connect_args(),
            **engine_kwargs
        )

    def get_pool_class(self) -> Optional[type[Pool]]:
        # Default (AsyncAdaptedQueuePool)
        return None

    def get_connect_args(self) -> dict[str, Any]:
        return {}

    def get_engine_kwargs(self) -> dict[str, Any]:
        return {
            "echo": False,
            "pool_size": 5,
            "max_overflow": 10,
            "pool_pre_ping": True,
        }

    def get_dialect_name(self) -> str:
        return "postgresql"
