"""
Tests for the admin credential check.
"""

from studio.core.setting import Settings
from studio.services.auth_service import AdminAuthService


def make_service(username="admin", password="hunter2") -> AdminAuthService:
    return AdminAuthService(Settings(ADMIN_USERNAME=username, ADMIN_PASSWORD=password))


class TestAdminAuthService:
    def test_exact_match(self):
        assert make_service().verify("admin", "hunter2") is True

    def test_mismatch(self):
        service = make_service()

        assert service.verify("admin", "hunter3") is False
        assert service.verify("Admin", "hunter2") is False
        assert service.verify("admin ", "hunter2") is False

    def test_missing_values(self):
        service = make_service()

        assert service.verify(None, "hunter2") is False
        assert service.verify("admin", None) is False

    def test_unconfigured_never_matches(self):
        service = make_service(username=None, password=None)

        assert service.is_configured is False
        assert service.verify(None, None) is False
        assert service.verify("", "") is False

