"""
Хранилище в базе данных (PostgreSQL в production, SQLite в тестах).
Те же контракты, что и у файлового хранилища.
"""
import json
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.entities.catalog import OverridesMap, ServiceOverride
from src.domain.entities.site_settings import AdminCredentials, TelegramSettings
from src.domain.interfaces.storage import (
    AdminCredentialsStore,
    OverrideStore,
    PageTextStore,
    StorageError,
    TelegramSettingsStore,
)
from src.infrastructure.database.models import PageText, ServiceOverrideRecord, SiteSetting

logger = logging.getLogger(__name__)

TELEGRAM_SETTINGS_KEY = "telegram"
ADMIN_CREDENTIALS_KEY = "admin_auth"


def _default_session_factory() -> async_sessionmaker:
    from src.infrastructure.database.connection import async_session_factory
    return async_session_factory


class DatabaseStore:
    """Общая часть: фабрика сессий"""

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self._session_factory = session_factory or _default_session_factory()

    def session(self) -> AsyncSession:
        return self._session_factory()


def _parse_record(record: ServiceOverrideRecord) -> Optional[ServiceOverride]:
    try:
        data = json.loads(record.data)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    override = ServiceOverride.from_dict(record.service_id, data)
    override.deleted = bool(record.deleted) or override.deleted
    return override


class DatabaseOverrideStore(DatabaseStore, OverrideStore):

    async def _load_records(self) -> list:
        async with self.session() as session:
            result = await session.execute(select(ServiceOverrideRecord))
            return list(result.scalars().all())

    async def read_all(self) -> OverridesMap:
        try:
            records = await self._load_records()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Ошибка чтения изменений каталога: {e}")
            return {}

        overrides: OverridesMap = {}
        for record in records:
            override = _parse_record(record)
            if override is None:
                logger.warning(f"Поврежденная запись изменений услуги {record.service_id}")
                continue
            overrides[record.service_id] = override
        return overrides

    async def read_for_update(self) -> OverridesMap:
        try:
            records = await self._load_records()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Ошибка чтения изменений каталога: {e}") from e

        overrides: OverridesMap = {}
        for record in records:
            override = _parse_record(record)
            if override is None:
                raise StorageError(f"Поврежденная запись изменений услуги {record.service_id}")
            overrides[record.service_id] = override
        return overrides

    async def write_all(self, overrides: OverridesMap) -> None:
        """Поврежденные строки, которых нет в overrides, не удаляются"""
        try:
            async with self.session() as session:
                result = await session.execute(
                    select(ServiceOverrideRecord).where(
                        ServiceOverrideRecord.service_id.notin_(list(overrides.keys()))
                    )
                )
                for record in result.scalars().all():
                    if _parse_record(record) is None:
                        logger.warning(f"Поврежденная запись изменений услуги {record.service_id} сохранена")
                        continue
                    await session.delete(record)
                for service_id, override in overrides.items():
                    await session.merge(ServiceOverrideRecord(
                        service_id=service_id,
                        data=json.dumps(override.to_dict(), ensure_ascii=False),
                        deleted=override.is_deleted,
                    ))
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Ошибка записи изменений каталога: {e}") from e


class DatabasePageTextStore(DatabaseStore, PageTextStore):

    async def read(self, key: str) -> str:
        try:
            async with self.session() as session:
                page_text = await session.get(PageText, key)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Ошибка чтения текста страницы {key}: {e}")
            return ""
        return page_text.value if page_text and page_text.value is not None else ""

    async def write(self, key: str, value: str) -> None:
        try:
            async with self.session() as session:
                await session.merge(PageText(key=key, value=value))
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Ошибка записи текста страницы {key}: {e}") from e


class _SiteSettingStore(DatabaseStore):
    """JSON-значение в таблице site_settings по фиксированному ключу"""

    key: str = ""

    async def _load(self) -> Optional[Any]:
        try:
            async with self.session() as session:
                setting = await session.get(SiteSetting, self.key)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Ошибка чтения настройки {self.key}: {e}")
            return None
        if setting is None:
            return None
        try:
            return json.loads(setting.value)
        except ValueError:
            logger.warning(f"Поврежденное значение настройки {self.key}")
            return None

    async def _save(self, value: dict) -> None:
        try:
            async with self.session() as session:
                await session.merge(SiteSetting(key=self.key, value=json.dumps(value, ensure_ascii=False)))
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Ошибка записи настройки {self.key}: {e}") from e


class DatabaseTelegramSettingsStore(_SiteSettingStore, TelegramSettingsStore):
    key = TELEGRAM_SETTINGS_KEY

    async def get(self) -> Optional[TelegramSettings]:
        return TelegramSettings.from_dict(await self._load())

    async def put(self, telegram_settings: TelegramSettings) -> None:
        await self._save(telegram_settings.to_dict())


class DatabaseAdminCredentialsStore(_SiteSettingStore, AdminCredentialsStore):
    key = ADMIN_CREDENTIALS_KEY

    async def get(self) -> Optional[AdminCredentials]:
        return AdminCredentials.from_dict(await self._load())

    async def put(self, credentials: AdminCredentials) -> None:
        await self._save(credentials.to_dict())
