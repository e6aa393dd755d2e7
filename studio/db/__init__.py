"""
Database module with abstraction layer.

This module provides:
- DatabaseAdapter interface: Abstract base class for database implementations
- SQLiteAdapter / PostgreSQLAdapter: Dialect-specific engine configuration
- Session helpers: URL normalization, adapter selection and session factory

To add a new database backend:
1. Create a new adapter class inheriting from DatabaseAdapter
2. Implement all abstract methods
3. Register its URL scheme in get_database_adapter() in session.py
"""

from studio.db.interface import DatabaseAdapter
from studio.db.session import (
    create_session_maker,
    get_database_adapter,
    normalize_database_url,
)

__all__ = [
    "DatabaseAdapter",
    "create_session_maker",
    "get_database_adapter",
    "normalize_database_url",
]
