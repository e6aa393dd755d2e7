"""
In-Memory Storage

Ordered-list implementation of the Storage contract, used when no database is
configured and in tests. Each collection keeps insertion order and its own
auto-increment counter starting at 1. Rows are handed out as copies, like
the detached objects the database backend returns.

Mutations happen between await points only, so the event loop never observes
a half-applied change even though nothing is locked.
"""

from typing import Any, Mapping, Optional

from studio.core.exceptions import UsernameTakenError
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
from studio.storage.interface import Storage, writable_changes


class MemoryStorage(Storage):
    """Storage backed by per-entity Python lists."""

    def __init__(self):
        self.users: list[User] = []
        self.services: list[Service] = []
        self.projects: list[Project] = []
        self.contacts: list[Contact] = []
        self._next_ids = {"users": 1, "services": 1, "projects": 1, "contacts": 1}

    def _allocate_id(self, collection: str) -> int:
        next_id = self._next_ids[collection]
        self._next_ids[collection] = next_id + 1
        return next_id

    @staticmethod
    def _copy(row):
        """Detached copy so callers never mutate stored rows (lists included)."""
        return type(row)(**row.model_dump())

    def _copies(self, rows: list) -> list:
        return [self._copy(row) for row in rows]

    def _find(self, rows: list, row_id: int):
        row = next((row for row in rows if row.id == row_id), None)
        return None if row is None else self._copy(row)

    def _replace(self, rows: list, row_id: int, model: type, changes: Mapping[str, Any]):
        for index, row in enumerate(rows):
            if row.id == row_id:
                merged = {**row.model_dump(), **writable_changes(model, changes)}
                rows[index] = self._copy(model(**merged))
                return self._copy(rows[index])
        return None

    @staticmethod
    def _remove(rows: list, row_id: int) -> bool:
        for index, row in enumerate(rows):
            if row.id == row_id:
                del rows[index]
                return True
        return False

    # Users

    async def get_all_users(self) -> list[User]:
        return self._copies(self.users)

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._find(self.users, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        user = next((user for user in self.users if user.username == username), None)
        return None if user is None else self._copy(user)

    async def create_user(self, data: UserBase) -> User:
        if await self.get_user_by_username(data.username) is not None:
            raise UsernameTakenError(data.username)
        user = User(**data.model_dump(), id=self._allocate_id("users"))
        self.users.append(user)
        return self._copy(user)

    # Services

    async def get_all_services(self) -> list[Service]:
        return self._copies(self.services)

    async def get_service(self, service_id: int) -> Optional[Service]:
        return self._find(self.services, service_id)

    async def create_service(self, data: ServiceBase) -> Service:
        service = Service(**data.model_dump(), id=self._allocate_id("services"))
        self.services.append(service)
        return self._copy(service)

    async def update_service(
        self, service_id: int, changes: Mapping[str, Any]
    ) -> Optional[Service]:
        return self._replace(self.services, service_id, Service, changes)

    async def delete_service(self, service_id: int) -> bool:
        return self._remove(self.services, service_id)

    # Projects

    async def get_all_projects(self) -> list[Project]:
        return self._copies(self.projects)

    async def get_project(self, project_id: int) -> Optional[Project]:
        return self._find(self.projects, project_id)

    async def get_projects_by_category(self, category: str) -> list[Project]:
        return self._copies(
            [project for project in self.projects if category in project.categories]
        )

    async def create_project(self, data: ProjectBase) -> Project:
        project = Project(**data.model_dump(), id=self._allocate_id("projects"))
        self.projects.append(project)
        return self._copy(project)

    async def update_project(
        self, project_id: int, changes: Mapping[str, Any]
    ) -> Optional[Project]:
        return self._replace(self.projects, project_id, Project, changes)

    async def delete_project(self, project_id: int) -> bool:
        return self._remove(self.projects, project_id)

    # Contacts

    async def get_all_contacts(self) -> list[Contact]:
        return self._copies(self.contacts)

    async def create_contact(self, data: ContactBase) -> Contact:
        fields = data.model_dump()
        fields["phone"] = fields.get("phone") or None
        contact = Contact(**fields, id=self._allocate_id("contacts"))
        self.contacts.append(contact)
        return self._copy(contact)
