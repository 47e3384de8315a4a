"""
Гибридная система логирования
- INFO, DEBUG → консоль
- WARNING, ERROR, CRITICAL → консоль + таблица system_logs
- BUSINESS события (заявки, изменения каталога) → консоль + system_logs
Запись в БД включается только при STORAGE_BACKEND=database.
"""
import logging
import sys
import json
from typing import Dict, Any, Optional

from src.config.settings import settings
from src.infrastructure.database.models import SystemLog

logger = logging.getLogger(__name__)


class HybridLogger:
    """Гибридная система логирования"""

    def __init__(self, persist_to_db: Optional[bool] = None):
        self.persist_to_db = settings.use_database if persist_to_db is None else persist_to_db
        self._setup_file_logger()

    def _setup_file_logger(self) -> None:
        """Настройка консольного логгера"""
        self.file_logger = logging.getLogger("heavy_profile")
        self.file_logger.setLevel(logging.DEBUG)

        # Консольный handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)

        # Проверяем, что handler еще не добавлен
        if not self.file_logger.handlers:
            self.file_logger.addHandler(console_handler)

    async def log(
        self,
        level: str,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Основной метод логирования"""
        level_upper = level.upper()

        # Всегда в консоль; BUSINESS пишется как INFO
        log_level = getattr(logging, level_upper, logging.INFO)
        if metadata:
            self.file_logger.log(log_level, f"{message} {json.dumps(metadata, ensure_ascii=False, default=str)}")
        else:
            self.file_logger.log(log_level, message)

        if self.persist_to_db and level_upper in ['ERROR', 'WARNING', 'CRITICAL', 'BUSINESS']:
            await self._save_to_db(level_upper, message, metadata)

    async def _save_to_db(
        self,
        level: str,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Сохранение в PostgreSQL"""
        try:
            from ..database.connection import async_session_factory
            async with async_session_factory() as session:
                log_entry = SystemLog(
                    level=level,
                    message=message,
                    module=(metadata or {}).get("module"),
                    extra_data=json.dumps(metadata, ensure_ascii=False, default=str) if metadata else None
                )
                session.add(log_entry)
                await session.commit()
        except Exception as e:
            # Не падаем при ошибке логирования
            self.file_logger.error(f"Ошибка сохранения лога в БД: {e}")

    async def error(self, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Логирование ошибок"""
        await self.log("ERROR", message, metadata)

    async def warning(self, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Логирование предупреждений"""
        await self.log("WARNING", message, metadata)

    async def critical(self, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Логирование критических ошибок"""
        await self.log("CRITICAL", message, metadata)

    async def business(self, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Логирование бизнес-событий"""
        await self.log("BUSINESS", message, metadata)

    async def info(self, message: str) -> None:
        """Информационное логирование (только в консоль)"""
        self.file_logger.info(message)

    async def debug(self, message: str) -> None:
        """Отладочное логирование (только в консоль)"""
        self.file_logger.debug(message)


# Глобальный экземпляр логгера
hybrid_logger = HybridLogger()
