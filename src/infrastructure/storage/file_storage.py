"""
Файловое хранилище: JSON-документы в каталоге DATA_DIR.

- services-overrides.json  изменения каталога {id: {...}}
- admin.json               тексты страниц {"pageTexts": {key: value}}
- telegram-settings.json   {"botToken", "chatId"}
- admin-auth.json          {"username", "passwordHash"}

Файловые операции выполняются в отдельном потоке (asyncio.to_thread).
"""
import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from src.domain.entities.catalog import OverridesMap, ServiceOverride
from src.domain.entities.site_settings import AdminCredentials, TelegramSettings
from src.domain.interfaces.storage import (
    AdminCredentialsStore,
    OverrideStore,
    PageTextStore,
    StorageError,
    TelegramSettingsStore,
)

logger = logging.getLogger(__name__)

OVERRIDES_FILE = "services-overrides.json"
PAGE_TEXTS_FILE = "admin.json"
TELEGRAM_SETTINGS_FILE = "telegram-settings.json"
ADMIN_AUTH_FILE = "admin-auth.json"


class JsonDocument:
    """Один JSON-файл: чтение с откатом на None, запись через временный файл"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self, strict: bool = False) -> Optional[Any]:
        """
        Содержимое файла.

        Args:
            strict: Поднимать StorageError, если файл есть, но не читается

        Returns:
            Данные или None (файла нет или он поврежден в нестрогом режиме)
        """
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            if strict:
                raise StorageError(f"Не удалось прочитать {self.path}: {e}") from e
            logger.error(f"Не удалось прочитать {self.path}: {e}")
            return None

    def save(self, data: Any) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Не удалось записать {self.path}: {e}") from e


class FileOverrideStore(OverrideStore):

    def __init__(self, data_dir: Path):
        self._document = JsonDocument(Path(data_dir) / OVERRIDES_FILE)

    async def read_all(self) -> OverridesMap:
        data = await asyncio.to_thread(self._document.load)
        if not isinstance(data, dict):
            return {}
        return {
            service_id: ServiceOverride.from_dict(service_id, value)
            for service_id, value in data.items()
            if isinstance(value, dict)
        }

    async def read_for_update(self) -> OverridesMap:
        data = await asyncio.to_thread(self._document.load, True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StorageError(f"Неожиданный формат {self._document.path}")

        overrides: OverridesMap = {}
        for service_id, value in data.items():
            if not isinstance(value, dict):
                raise StorageError(f"Некорректная запись {service_id} в {self._document.path}")
            overrides[service_id] = ServiceOverride.from_dict(service_id, value)
        return overrides

    async def write_all(self, overrides: OverridesMap) -> None:
        await asyncio.to_thread(self._document.save, {
            service_id: override.to_dict()
            for service_id, override in overrides.items()
        })


class FilePageTextStore(PageTextStore):

    def __init__(self, data_dir: Path):
        self._document = JsonDocument(Path(data_dir) / PAGE_TEXTS_FILE)

    async def read(self, key: str) -> str:
        data = await asyncio.to_thread(self._document.load)
        if not isinstance(data, dict) or not isinstance(data.get("pageTexts"), dict):
            return ""
        value = data["pageTexts"].get(key)
        return value if isinstance(value, str) else ""

    def _update(self, key: str, value: str) -> None:
        document = self._document.load(strict=True)
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise StorageError(f"Неожиданный формат {self._document.path}")

        texts = document.setdefault("pageTexts", {})
        if not isinstance(texts, dict):
            raise StorageError(f"Неожиданный формат pageTexts в {self._document.path}")

        texts[key] = value
        self._document.save(document)

    async def write(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)


class FileTelegramSettingsStore(TelegramSettingsStore):

    def __init__(self, data_dir: Path):
        self._document = JsonDocument(Path(data_dir) / TELEGRAM_SETTINGS_FILE)

    async def get(self) -> Optional[TelegramSettings]:
        return TelegramSettings.from_dict(await asyncio.to_thread(self._document.load))

    async def put(self, telegram_settings: TelegramSettings) -> None:
        await asyncio.to_thread(self._document.save, telegram_settings.to_dict())


class FileAdminCredentialsStore(AdminCredentialsStore):

    def __init__(self, data_dir: Path):
        self._document = JsonDocument(Path(data_dir) / ADMIN_AUTH_FILE)

    async def get(self) -> Optional[AdminCredentials]:
        return AdminCredentials.from_dict(await asyncio.to_thread(self._document.load))

    async def put(self, credentials: AdminCredentials) -> None:
        await asyncio.to_thread(self._document.save, credentials.to_dict())
