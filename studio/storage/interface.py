"""
Storage Abstraction Interface

This module defines the data-access contract shared by every storage backend.
Routes depend only on ``Storage``; the concrete implementation is chosen once
at startup (see ``studio.storage.create_storage``) and injected into the app.

Contract:
- get_* return None for a missing id and never raise for it
- update_* merge only the supplied fields, never change the id, and return
  None for a missing id without side effects
- delete_* return True when a row was removed, False when the id was absent
- initialize_default_data() seeds each empty collection exactly once
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

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
from studio.storage.defaults import DEFAULT_PROJECTS, DEFAULT_SERVICES

logger = logging.getLogger(__name__)


class Storage(ABC):
    """
    Abstract base class for storage backends.

    To add a new backend:
    1. Create a new class inheriting from Storage
    2. Implement all abstract methods
    3. Select it in create_storage()
    """

    async def initialize(self) -> None:
        """Prepare the backend (create tables, open pools). No-op by default."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""

    # Users

    @abstractmethod
    async def get_all_users(self) -> list[User]:
        pass

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create_user(self, data: UserBase) -> User:
        """
        Create a user.

        Raises:
            UsernameTakenError: If the username already exists
        """
        pass

    # Services

    @abstractmethod
    async def get_all_services(self) -> list[Service]:
        pass

    @abstractmethod
    async def get_service(self, service_id: int) -> Optional[Service]:
        pass

    @abstractmethod
    async def create_service(self, data: ServiceBase) -> Service:
        pass

    @abstractmethod
    async def update_service(
        self, service_id: int, changes: Mapping[str, Any]
    ) -> Optional[Service]:
        pass

    @abstractmethod
    async def delete_service(self, service_id: int) -> bool:
        pass

    # Projects

    @abstractmethod
    async def get_all_projects(self) -> list[Project]:
        pass

    @abstractmethod
    async def get_project(self, project_id: int) -> Optional[Project]:
        pass

    @abstractmethod
    async def get_projects_by_category(self, category: str) -> list[Project]:
        """
        Return projects whose categories string contains ``category``.

        This is plain substring containment, not a tag match: "modern" also
        matches "postmodern".
        """
        pass

    @abstractmethod
    async def create_project(self, data: ProjectBase) -> Project:
        pass

    @abstractmethod
    async def update_project(
        self, project_id: int, changes: Mapping[str, Any]
    ) -> Optional[Project]:
        pass

    @abstractmethod
    async def delete_project(self, project_id: int) -> bool:
        pass

    # Contacts

    @abstractmethod
    async def get_all_contacts(self) -> list[Contact]:
        pass

    @abstractmethod
    async def create_contact(self, data: ContactBase) -> Contact:
        """Store a contact submission. An empty or missing phone is stored as None."""
        pass

    # Seeding

    async def initialize_default_data(self) -> None:
        """
        Populate the default service and project catalogs.

        Each collection is seeded only when it is empty, so repeated calls
        never duplicate the defaults.
        """
        if not await self.get_all_services():
            logger.info("Initializing default services...")
            for service in DEFAULT_SERVICES:
                await self.create_service(ServiceBase(**service))

        if not await self.get_all_projects():
            logger.info("Initializing default projects...")
            for project in DEFAULT_PROJECTS:
                await self.create_project(ProjectBase(**project))


def writable_changes(model: type, changes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Filter an update payload down to the model's writable fields.

    ``id`` and unknown keys are dropped so updates can never re-key a row.
    """
    fields = set(model.model_fields) - {"id"}
    return {key: value for key, value in changes.items() if key in fields}
