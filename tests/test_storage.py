"""
Storage contract tests.

Contract tests run against MemoryStorage and against DatabaseStorage on a
temporary SQLite file (see the ``storage`` fixture in conftest.py).
TestCreateStorage covers backend selection.
"""

import pytest

from studio.core.exceptions import UsernameTakenError
from studio.core.setting import Settings
from studio.db.models import ContactBase, ProjectBase, ServiceBase, UserBase
from studio.storage import DatabaseStorage, MemoryStorage, create_storage
from studio.storage.defaults import DEFAULT_PROJECTS, DEFAULT_SERVICES

pytestmark = pytest.mark.asyncio


def make_service(title: str = "Lighting Design") -> ServiceBase:
    return ServiceBase(title=title, description="Layered lighting plans.", icon="bi-lamp")


def make_project(title: str = "Loft", categories: str = "residential,modern", **overrides) -> ProjectBase:
    fields = {
        "title": title,
        "description": "Open-plan loft conversion.",
        "image": "https://images.example.com/loft.jpg",
        "categories": categories,
        "details": "Converted warehouse floor with exposed brick.",
        "scope": ["Space planning", "Lighting design"],
        "location": "Harbour District",
        "size": "1,500 sq ft",
        "duration": "4 months",
        "style": "Industrial",
        "year": "2024",
    }
    fields.update(overrides)
    return ProjectBase(**fields)


class TestServices:
    """CRUD behavior for the services collection."""

    async def test_create_assigns_fresh_ids_from_one(self, storage):
        created = [await storage.create_service(make_service(f"Service {i}")) for i in range(3)]

        assert [service.id for service in created] == [1, 2, 3]
        assert created[0].title == "Service 0"

    async def test_ids_are_not_reused_after_delete(self, storage):
        first = await storage.create_service(make_service("First"))
        second = await storage.create_service(make_service("Second"))
        assert await storage.delete_service(second.id)

        third = await storage.create_service(make_service("Third"))

        assert third.id not in {first.id, second.id}

    async def test_get_all_returns_insertion_order(self, storage):
        for title in ("A", "B", "C"):
            await storage.create_service(make_service(title))

        services = await storage.get_all_services()

        assert [service.title for service in services] == ["A", "B", "C"]

    async def test_get_missing_returns_none(self, storage):
        assert await storage.get_service(42) is None

    async def test_update_merges_only_supplied_fields(self, storage):
        service = await storage.create_service(make_service("Old title"))

        updated = await storage.update_service(service.id, {"title": "New title"})

        assert updated.id == service.id
        assert updated.title == "New title"
        assert updated.description == "Layered lighting plans."
        assert updated.icon == "bi-lamp"
        assert (await storage.get_service(service.id)).title == "New title"

    async def test_update_ignores_id_in_changes(self, storage):
        service = await storage.create_service(make_service())

        updated = await storage.update_service(service.id, {"id": 999, "icon": "bi-box"})

        assert updated.id == service.id
        assert updated.icon == "bi-box"
        assert await storage.get_service(999) is None

    async def test_update_missing_returns_none_without_side_effect(self, storage):
        await storage.create_service(make_service("Untouched"))

        assert await storage.update_service(999999, {"title": "Ghost"}) is None

        services = await storage.get_all_services()
        assert [service.title for service in services] == ["Untouched"]

    async def test_delete(self, storage):
        service = await storage.create_service(make_service())

        assert await storage.delete_service(service.id) is True
        assert await storage.get_service(service.id) is None
        assert await storage.delete_service(service.id) is False

    async def test_delete_missing_returns_false(self, storage):
        assert await storage.delete_service(123) is False

    async def test_ids_beyond_64_bits_are_missing(self, storage):
        await storage.create_service(make_service())
        huge = 10 ** 20

        assert await storage.get_service(huge) is None
        assert await storage.get_service(-huge) is None
        assert await storage.update_service(huge, {"title": "Ghost"}) is None
        assert await storage.delete_service(huge) is False
        assert len(await storage.get_all_services()) == 1

    async def test_returned_rows_are_copies(self, storage):
        created = await storage.create_service(make_service("Original"))
        created.title = "Changed by caller"

        fetched = await storage.get_service(created.id)
        fetched.title = "Changed again"
        (await storage.get_all_services())[0].title = "And again"

        assert (await storage.get_service(created.id)).title == "Original"


class TestProjects:
    """CRUD and category filtering for the projects collection."""

    async def test_create_keeps_scope_order(self, storage):
        project = await storage.create_project(
            make_project(scope=["Demolition", "Framing", "Finishes"])
        )

        fetched = await storage.get_project(project.id)

        assert fetched.scope == ["Demolition", "Framing", "Finishes"]
        assert fetched.categories == "residential,modern"

    async def test_category_filter_is_substring_match(self, storage):
        await storage.create_project(make_project("Loft", "residential,modern"))
        await storage.create_project(make_project("Gallery", "commercial,postmodern"))
        await storage.create_project(make_project("Manor", "residential,traditional"))

        matches = await storage.get_projects_by_category("modern")

        assert [project.title for project in matches] == ["Loft", "Gallery"]

    async def test_category_filter_is_case_sensitive(self, storage):
        await storage.create_project(make_project("Loft", "residential,modern"))

        assert await storage.get_projects_by_category("MODERN") == []

    async def test_category_filter_treats_wildcards_literally(self, storage):
        await storage.create_project(make_project("Loft", "residential,modern"))

        assert await storage.get_projects_by_category("%") == []
        assert await storage.get_projects_by_category("res_dential") == []

    async def test_category_filter_without_matches(self, storage):
        await storage.create_project(make_project())

        assert await storage.get_projects_by_category("hospitality") == []

    async def test_update_replaces_scope(self, storage):
        project = await storage.create_project(make_project())

        updated = await storage.update_project(project.id, {"scope": ["Art curation"], "year": "2025"})

        assert updated.scope == ["Art curation"]
        assert updated.year == "2025"
        assert updated.title == "Loft"
        assert (await storage.get_project(project.id)).scope == ["Art curation"]

    async def test_update_missing_returns_none(self, storage):
        assert await storage.update_project(7, {"title": "Nope"}) is None
        assert await storage.get_all_projects() == []

    async def test_ids_beyond_64_bits_are_missing(self, storage):
        huge = 2 ** 63

        assert await storage.get_project(huge) is None
        assert await storage.update_project(huge, {"title": "Nope"}) is None
        assert await storage.delete_project(huge) is False

    async def test_returned_scope_is_not_shared(self, storage):
        project = await storage.create_project(make_project())
        project.scope.append("Added by caller")

        assert (await storage.get_project(project.id)).scope == ["Space planning", "Lighting design"]

    async def test_delete(self, storage):
        project = await storage.create_project(make_project())

        assert await storage.delete_project(project.id) is True
        assert await storage.get_project(project.id) is None
        assert await storage.delete_project(project.id) is False


class TestContacts:
    async def test_create_contact_defaults_phone_to_none(self, storage):
        contact = await storage.create_contact(
            ContactBase(name="A", email="a@b.com", service="Space Planning", message="hi")
        )

        assert contact.id == 1
        assert contact.phone is None
        assert contact.service == "Space Planning"

    async def test_empty_phone_is_stored_as_none(self, storage):
        contact = await storage.create_contact(
            ContactBase(name="A", email="a@b.com", phone="", service="Lighting Design", message="hi")
        )

        assert contact.phone is None

    async def test_get_all_contacts(self, storage):
        await storage.create_contact(
            ContactBase(name="A", email="a@b.com", phone="555-0100", service="Lighting Design", message="hi")
        )
        await storage.create_contact(
            ContactBase(name="B", email="b@b.com", service="Color Consultation", message="hello")
        )

        contacts = await storage.get_all_contacts()

        assert [contact.name for contact in contacts] == ["A", "B"]
        assert contacts[0].phone == "555-0100"


class TestUsers:
    async def test_create_and_lookup(self, storage):
        user = await storage.create_user(UserBase(username="designer"))

        assert user.id == 1
        assert (await storage.get_user(user.id)).username == "designer"
        assert (await storage.get_user_by_username("designer")).id == user.id
        assert await storage.get_user_by_username("nobody") is None
        assert [u.username for u in await storage.get_all_users()] == ["designer"]

    async def test_duplicate_username_is_rejected(self, storage):
        await storage.create_user(UserBase(username="designer"))

        with pytest.raises(UsernameTakenError):
            await storage.create_user(UserBase(username="designer"))

        assert len(await storage.get_all_users()) == 1


class TestDefaultData:
    async def test_seeding_is_idempotent(self, storage):
        await storage.initialize_default_data()
        await storage.initialize_default_data()

        services = await storage.get_all_services()
        projects = await storage.get_all_projects()

        assert len(services) == len(DEFAULT_SERVICES)
        assert len(projects) == len(DEFAULT_PROJECTS)
        assert len({service.title for service in services}) == len(DEFAULT_SERVICES)
        assert services[0].title == "Space Planning"
        assert projects[0].scope[0] == "Space planning"

    async def test_seeding_skips_non_empty_collections(self, storage):
        await storage.create_service(make_service("Custom only"))

        await storage.initialize_default_data()

        services = await storage.get_all_services()
        assert [service.title for service in services] == ["Custom only"]
        assert len(await storage.get_all_projects()) == len(DEFAULT_PROJECTS)


class TestCreateStorage:
    """Backend selection from settings (independent of the ``storage`` fixture)."""

    async def test_memory_without_database_url(self):
        assert isinstance(create_storage(Settings(DATABASE_URL=None)), MemoryStorage)

    async def test_database_with_url(self, tmp_path):
        storage = create_storage(Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'site.db'}"))

        assert isinstance(storage, DatabaseStorage)
        assert storage.database_url.startswith("sqlite+aiosqlite:///")
        assert storage.adapter.get_dialect_name() == "sqlite"
        await storage.close()
