"""
Domain entity для системных логов
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from enum import Enum


class LogLevel(Enum):
    """Уровни, которые попадают в таблицу system_logs"""
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    BUSINESS = "BUSINESS"

    @property
    def display_name(self) -> str:
        """Отображаемое название"""
        names = {
            LogLevel.WARNING: "Предупреждение",
            LogLevel.ERROR: "Ошибка",
            LogLevel.CRITICAL: "Критическая ошибка",
            LogLevel.BUSINESS: "Событие",
        }
        return names.get(self, self.value)


@dataclass
class SystemLog:
    """Сущность системного лога"""
    id: Optional[int]
    level: LogLevel
    message: str
    module: Optional[str] = None
    extra_data: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_error(self) -> bool:
        return self.level in (LogLevel.ERROR, LogLevel.CRITICAL)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "level": self.level.value,
            "levelName": self.level.display_name,
            "message": self.message,
            "module": self.module,
            "extraData": self.extra_data,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
