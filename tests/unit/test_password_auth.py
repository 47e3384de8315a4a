"""
Тесты авторизации администратора
"""
import pytest

from src.application.web.password_auth import PasswordAuthService
from src.domain.entities.site_settings import AdminCredentials
from tests.mocks.storage_mock import InMemoryAdminCredentialsStore


@pytest.fixture
def store():
    return InMemoryAdminCredentialsStore()


@pytest.fixture
def auth_service(store):
    return PasswordAuthService(store, default_username="admin", default_password="admin123")


class TestAuthenticate:

    async def test_environment_defaults(self, auth_service):
        assert await auth_service.authenticate("admin", "admin123") is True
        assert await auth_service.authenticate("admin", "wrong") is False
        assert await auth_service.authenticate("root", "admin123") is False

    async def test_empty_password_rejected(self, auth_service):
        assert await auth_service.authenticate("admin", "") is False

    async def test_stored_credentials_have_priority(self, store, auth_service):
        store.stored = AdminCredentials(
            username="manager",
            password_hash=PasswordAuthService.hash_password("secret-pass"),
        )

        assert await auth_service.authenticate("manager", "secret-pass") is True
        assert await auth_service.authenticate("admin", "admin123") is False

    async def test_corrupt_hash_is_rejected(self, store, auth_service):
        store.stored = AdminCredentials(username="admin", password_hash="not-a-bcrypt-hash")

        assert await auth_service.verify_password("admin123") is False


class TestChangeCredentials:

    async def test_change_password(self, store, auth_service):
        result = await auth_service.change_password("admin123", "new-secret")

        assert result.success is True
        assert store.stored.username == "admin"
        assert store.stored.password_hash != "new-secret"
        assert await auth_service.authenticate("admin", "new-secret") is True
        assert await auth_service.authenticate("admin", "admin123") is False

    async def test_change_password_requires_current(self, store, auth_service):
        result = await auth_service.change_password("wrong", "new-secret")

        assert result.success is False
        assert result.error == "Неверный текущий пароль"
        assert store.stored is None

    async def test_short_new_password_rejected(self, auth_service):
        result = await auth_service.change_password("admin123", "12345")

        assert result.success is False
        assert "6" in result.error

    async def test_change_username_keeps_password(self, auth_service):
        result = await auth_service.change_username("  manager  ")

        assert result.success is True
        assert await auth_service.current_username() == "manager"
        assert await auth_service.authenticate("manager", "admin123") is True

    async def test_short_username_rejected(self, store, auth_service):
        result = await auth_service.change_username(" ab ")

        assert result.success is False
        assert store.stored is None

    async def test_store_failure_reported(self):
        service = PasswordAuthService(
            InMemoryAdminCredentialsStore(fail_writes=True),
            default_username="admin",
            default_password="admin123",
        )

        result = await service.change_password("admin123", "new-secret")

        assert result.success is False
        assert result.error == "Не удалось сохранить изменения"
