"""
Интерфейсы хранилищ сайта.
Две реализации: JSON-файлы (infrastructure/storage/file_storage.py)
и база данных (infrastructure/storage/database_storage.py).
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..entities.catalog import OverridesMap
from ..entities.site_settings import AdminCredentials, TelegramSettings


class StorageError(Exception):
    """Ошибка записи в хранилище или чтения перед записью"""


class OverrideStore(ABC):
    """
    Хранилище изменений каталога.
    read_all никогда не падает: поврежденные или отсутствующие данные дают пустой словарь.
    Перед перезаписью используется read_for_update, который на поврежденных данных падает.
    """

    @abstractmethod
    async def read_all(self) -> OverridesMap:
        """
        Все записи изменений.

        Returns:
            Словарь ServiceOverride по ID услуги
        """

    @abstractmethod
    async def read_for_update(self) -> OverridesMap:
        """
        Все записи изменений для последующей write_all.
        Отсутствие данных дает пустой словарь.

        Raises:
            StorageError: Если данные есть, но прочитать их целиком не удалось
        """

    @abstractmethod
    async def write_all(self, overrides: OverridesMap) -> None:
        """
        Полная перезапись набора изменений.

        Raises:
            StorageError: Если запись не удалась
        """


class PageTextStore(ABC):
    """Тексты страниц: строковый ключ → строковое значение"""

    @abstractmethod
    async def read(self, key: str) -> str:
        """Значение по ключу, пустая строка если ключа нет"""

    @abstractmethod
    async def write(self, key: str, value: str) -> None:
        """
        Raises:
            StorageError: Если запись не удалась
        """


class TelegramSettingsStore(ABC):
    """Настройки бота для уведомлений о заявках"""

    @abstractmethod
    async def get(self) -> Optional[TelegramSettings]:
        """Сохраненные настройки или None"""

    @abstractmethod
    async def put(self, telegram_settings: TelegramSettings) -> None:
        """
        Raises:
            StorageError: Если запись не удалась
        """


class AdminCredentialsStore(ABC):
    """Учетные данные администратора"""

    @abstractmethod
    async def get(self) -> Optional[AdminCredentials]:
        """Сохраненные учетные данные или None (используются значения из окружения)"""

    @abstractmethod
    async def put(self, credentials: AdminCredentials) -> None:
        """
        Raises:
            StorageError: Если запись не удалась
        """
