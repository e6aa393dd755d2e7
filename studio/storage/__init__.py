"""
Storage module.

This module provides:
- Storage interface: The data-access contract routes depend on
- DatabaseStorage: Relational implementation (SQLite / PostgreSQL)
- MemoryStorage: In-process implementation for no-database environments
- create_storage(): Picks the implementation from settings
"""

import logging

from studio.core.setting import Settings
from studio.storage.database import DatabaseStorage
from studio.storage.interface import Storage
from studio.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> Storage:
    """
    Build the storage backend for this process.

    A configured DATABASE_URL selects DatabaseStorage; otherwise data lives
    in memory and is lost on restart.
    """
    if settings.DATABASE_URL:
        logger.info("Using database storage")
        return DatabaseStorage(settings.DATABASE_URL)

    logger.warning("DATABASE_URL not set, using in-memory storage")
    return MemoryStorage()


__all__ = [
    "Storage",
    "DatabaseStorage",
    "MemoryStorage",
    "create_storage",
]
