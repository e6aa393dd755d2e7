"""
Relational Storage

SQLModel/SQLAlchemy implementation of the Storage contract. Works against any
backend with a DatabaseAdapter (SQLite via aiosqlite, PostgreSQL via asyncpg).

Key Features:
- One session (and one transaction) per storage operation
- Automatic rollback on failure; SQLAlchemy errors surface as StorageError
- No retries: a connectivity failure propagates to the route layer

Concurrent updates to the same row are not versioned; the last commit wins.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from studio.core.exceptions import StorageError, UsernameTakenError
from studio.db.interface import DatabaseAdapter
from studio.db.models import (
    Contact,
    ContactBase,
    Project,
    ProjectBase,
    Service,
    ServiceBase,
    User,
    UserBase,
)
from studio.db.session import (
    create_session_maker,
    get_database_adapter,
    normalize_database_url,
)
from studio.storage.interface import Storage, writable_changes

logger = logging.getLogger(__name__)

# Primary keys are signed 64-bit integers on every supported database
MIN_ROW_ID = -(2 ** 63)
MAX_ROW_ID = 2 ** 63 - 1


def _storable_id(row_id: int) -> bool:
    """Ids outside the column range cannot match a row, so lookups treat them as missing."""
    return MIN_ROW_ID <= row_id <= MAX_ROW_ID


class DatabaseStorage(Storage):
    """
    Storage backed by a relational database.

    Args:
        database_url: Connection string; plain postgres:// and sqlite:/// URLs
            are rewritten to their async drivers
        adapter: Optional adapter override (defaults to one picked by URL scheme)
    """

    def __init__(self, database_url: str, adapter: Optional[DatabaseAdapter] = None):
        self.database_url = normalize_database_url(database_url)
        self.adapter = adapter or get_database_adapter(self.database_url)
        self.engine = self.adapter.create_engine(self.database_url)
        self._session_maker = create_session_maker(self.engine)

    @asynccontextmanager
    async def _session_scope(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        Yield a session that commits on success and rolls back on failure.

        Raises:
            StorageError: Wrapping any SQLAlchemy error raised inside the scope
                or during commit
        """
        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise StorageError(f"Failed to {operation}", original_error=e) from e

    async def initialize(self) -> None:
        """Create any missing tables."""
        try:
            async with self.engine.begin() as connection:
                await connection.run_sync(SQLModel.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError("Failed to create tables", original_error=e) from e
        logger.info(f"Database storage ready ({self.adapter.get_dialect_name()})")

    async def close(self) -> None:
        await self.engine.dispose()

    async def _all(self, model: type, operation: str) -> list:
        async with self._session_scope(operation) as session:
            result = await session.exec(select(model).order_by(model.id))
            return list(result.all())

    async def _get(self, model: type, row_id: int, operation: str):
        if not _storable_id(row_id):
            return None
        async with self._session_scope(operation) as session:
            return await session.get(model, row_id)

    async def _insert(self, row, operation: str):
        async with self._session_scope(operation) as session:
            session.add(row)
            await session.flush()
            await session.refresh(row)
        return row

    async def _update(self, model: type, row_id: int, changes: Mapping[str, Any], operation: str):
        if not _storable_id(row_id):
            return None
        async with self._session_scope(operation) as session:
            row = await session.get(model, row_id)
            if row is None:
                return None
            for key, value in writable_changes(model, changes).items():
                setattr(row, key, value)
            session.add(row)
            await session.flush()
            await session.refresh(row)
        return row

    async def _delete(self, model: type, row_id: int, operation: str) -> bool:
        if not _storable_id(row_id):
            return False
        async with self._session_scope(operation) as session:
            row = await session.get(model, row_id)
            if row is None:
                return False
            await session.delete(row)
        return True

    # Users

    async def get_all_users(self) -> list[User]:
        return await self._all(User, "fetch users")

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self._get(User, user_id, "fetch user")

    async def get_user_by_username(self, username: str) -> Optional[User]:
        async with self._session_scope("fetch user") as session:
            result = await session.exec(select(User).where(User.username == username))
            return result.first()

    async def create_user(self, data: UserBase) -> User:
        try:
            return await self._insert(User(**data.model_dump()), "create user")
        except StorageError as e:
            if isinstance(e.original_error, IntegrityError):
                raise UsernameTakenError(data.username) from e
            raise

    # Services

    async def get_all_services(self) -> list[Service]:
        return await self._all(Service, "fetch services")

    async def get_service(self, service_id: int) -> Optional[Service]:
        return await self._get(Service, service_id, "fetch service")

    async def create_service(self, data: ServiceBase) -> Service:
        return await self._insert(Service(**data.model_dump()), "create service")

    async def update_service(
        self, service_id: int, changes: Mapping[str, Any]
    ) -> Optional[Service]:
        return await self._update(Service, service_id, changes, "update service")

    async def delete_service(self, service_id: int) -> bool:
        return await self._delete(Service, service_id, "delete service")

    # Projects

    async def get_all_projects(self) -> list[Project]:
        return await self._all(Project, "fetch projects")

    async def get_project(self, project_id: int) -> Optional[Project]:
        return await self._get(Project, project_id, "fetch project")

    async def get_projects_by_category(self, category: str) -> list[Project]:
        statement = (
            select(Project)
            .where(Project.categories.contains(category, autoescape=True))
            .order_by(Project.id)
        )
        async with self._session_scope("fetch projects by category") as session:
            result = await session.exec(statement)
            return list(result.all())

    async def create_project(self, data: ProjectBase) -> Project:
        return await self._insert(Project(**data.model_dump()), "create project")

    async def update_project(
        self, project_id: int, changes: Mapping[str, Any]
    ) -> Optional[Project]:
        return await self._update(Project, project_id, changes, "update project")

    async def delete_project(self, project_id: int) -> bool:
        return await self._delete(Project, project_id, "delete project")

    # Contacts

    async def get_all_contacts(self) -> list[Contact]:
        return await self._all(Contact, "fetch contacts")

    async def create_contact(self, data: ContactBase) -> Contact:
        fields = data.model_dump()
        fields["phone"] = fields.get("phone") or None
        return await self._insert(Contact(**fields), "create contact")
