"""
Shared fixtures.

DATABASE_URL is cleared before any ``studio`` import so the module-level
app built in studio.main uses in-memory storage.
"""

import os

os.environ.pop("DATABASE_URL", None)

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from studio.core.exceptions import StorageError
from studio.core.setting import Settings
from studio.main import create_app
from studio.storage import DatabaseStorage, MemoryStorage

ADMIN_USERNAME = "studio-admin"
ADMIN_PASSWORD = "s3cret-pass"


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'studio.db'}"


class FailingStorage(MemoryStorage):
    """Storage whose data operations all fail like a dropped database connection."""


async def _fail(self, *args, **kwargs):
    raise StorageError(
        "connection refused",
        original_error=ConnectionRefusedError("connection refused"),
    )


for _operation in (
    "get_all_users", "get_user", "get_user_by_username", "create_user",
    "get_all_services", "get_service", "create_service", "update_service", "delete_service",
    "get_all_projects", "get_project", "get_projects_by_category",
    "create_project", "update_project", "delete_project",
    "get_all_contacts", "create_contact",
):
    setattr(FailingStorage, _operation, _fail)


@pytest.fixture
def settings():
    return Settings(
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        DATABASE_URL=None,
        SEED_DEFAULT_DATA=False,
        LOG_LEVEL="WARNING",
        RATE_LIMIT_ENABLED=False,
    )


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def client(settings, memory_storage):
    """TestClient over an app serving an empty in-memory store."""
    with TestClient(create_app(settings=settings, storage=memory_storage)) as test_client:
        yield test_client


@pytest.fixture
def failing_client(settings):
    with TestClient(create_app(settings=settings, storage=FailingStorage())) as test_client:
        yield test_client


@pytest.fixture
def database_client(settings, tmp_path):
    """TestClient over an app serving a temporary SQLite database."""
    storage = DatabaseStorage(sqlite_url(tmp_path))
    with TestClient(create_app(settings=settings, storage=storage)) as test_client:
        yield test_client


@pytest_asyncio.fixture(params=["memory", "database"])
async def storage(request, tmp_path):
    """Each storage contract test runs against both implementations."""
    if request.param == "memory":
        backend = MemoryStorage()
    else:
        backend = DatabaseStorage(sqlite_url(tmp_path))

    await backend.initialize()
    yield backend
    await backend.close()
