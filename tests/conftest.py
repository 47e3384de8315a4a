"""
Общие fixtures для всех тестов
"""
import os

# Настройки читаются при импорте приложения
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORAGE_BACKEND", "file")
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "")
os.environ.setdefault("TELEGRAM_CHAT_ID", "")

from typing import Generator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.main import app
from src.config.settings import settings
from src.application.web import dependencies
from src.infrastructure.database.models import Base
from src.infrastructure.notifications.telegram_notifier import TelegramNotifier
from src.infrastructure.services.address_search import AddressSearchService
from src.infrastructure.storage.file_storage import (
    FileAdminCredentialsStore,
    FileOverrideStore,
    FilePageTextStore,
    FileTelegramSettingsStore,
)
from tests.fixtures.factories import build_catalog
from tests.mocks.storage_mock import RecordingTransport

# SQLite в памяти вместо PostgreSQL, одно соединение на весь движок
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def catalog():
    """Небольшой тестовый каталог"""
    return build_catalog()


@pytest.fixture
def data_dir(tmp_path):
    """Каталог файлового хранилища для одного теста"""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest_asyncio.fixture
async def test_engine():
    """Создает тестовый движок базы данных"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def telegram_transport() -> RecordingTransport:
    """Ответы Telegram Bot API (по умолчанию 200)"""
    return RecordingTransport()


@pytest.fixture
def nominatim_transport() -> RecordingTransport:
    return RecordingTransport(json_body=[
        {"display_name": "Москва, Тверская улица, 1", "lat": "55.757", "lon": "37.615"},
        {"display_name": "Москва, Тверская улица, 3", "lat": "55.758", "lon": "37.613"},
    ])


@pytest.fixture
def test_client(data_dir, telegram_transport, nominatim_transport) -> Generator[TestClient, None, None]:
    """
    Тестовый клиент FastAPI: файловое хранилище во временном каталоге,
    Telegram и Nominatim через httpx.MockTransport.
    """
    app.dependency_overrides[dependencies.get_override_store] = lambda: FileOverrideStore(data_dir)
    app.dependency_overrides[dependencies.get_page_text_store] = lambda: FilePageTextStore(data_dir)
    app.dependency_overrides[dependencies.get_telegram_settings_store] = lambda: FileTelegramSettingsStore(data_dir)
    app.dependency_overrides[dependencies.get_admin_credentials_store] = lambda: FileAdminCredentialsStore(data_dir)
    app.dependency_overrides[dependencies.get_telegram_notifier] = lambda: TelegramNotifier(
        api_url="https://telegram.test",
        timeout=1,
        transport=httpx.MockTransport(telegram_transport),
    )
    app.dependency_overrides[dependencies.get_address_search_service] = lambda: AddressSearchService(
        base_url="https://nominatim.test/search",
        transport=httpx.MockTransport(nominatim_transport),
    )

    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(test_client) -> TestClient:
    """Клиент с активной сессией администратора"""
    response = test_client.post(
        "/api/admin/login",
        json={"username": settings.admin_username, "password": settings.admin_password},
    )
    assert response.status_code == 200
    return test_client


# Автоматическое применение маркеров
def pytest_collection_modifyitems(config, items):
    """Автоматически применяет маркеры к тестам"""
    for item in items:
        path = str(item.fspath)

        # Определяем тип теста по пути к файлу
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)

        # Добавляем специфичные маркеры
        if "database" in path:
            item.add_marker(pytest.mark.db)
        if "api" in path:
            item.add_marker(pytest.mark.api)
        if "telegram" in path:
            item.add_marker(pytest.mark.telegram)
        if "lead" in path:
            item.add_marker(pytest.mark.leads)
        if "catalog" in path:
            item.add_marker(pytest.mark.catalog)
