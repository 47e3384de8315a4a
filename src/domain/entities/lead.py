"""
Бизнес-сущность заявки с сайта для domain слоя.
Заявка не сохраняется, а сразу уходит в чат Telegram.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LeadFailure(Enum):
    """Причины неуспешной отправки заявки"""
    VALIDATION_FAILED = "validation_failed"
    NOT_CONFIGURED = "not_configured"
    DELIVERY_FAILED = "delivery_failed"


@dataclass
class LeadSubmission:
    """
    Заявка посетителя сайта.
    Обязательны имя и телефон, формат телефона не проверяется.
    """
    name: str
    phone: str
    work_type: Optional[str] = None
    comment: Optional[str] = None
    source_url: Optional[str] = None
    form_name: Optional[str] = None
    service_name: Optional[str] = None

    def is_valid(self) -> bool:
        """Проверка обязательных полей"""
        return bool(
            self.name and self.name.strip() and
            self.phone and self.phone.strip()
        )


@dataclass
class LeadResult:
    """Результат отправки заявки (tagged result, не исключение)"""
    success: bool
    failure: Optional[LeadFailure] = None
    error: Optional[str] = None
    delivered: bool = False

    @classmethod
    def ok(cls, delivered: bool = True) -> "LeadResult":
        return cls(success=True, delivered=delivered)

    @classmethod
    def fail(cls, failure: LeadFailure, error: str) -> "LeadResult":
        return cls(success=False, failure=failure, error=error)

    def to_dict(self) -> dict:
        """Ответ для UI"""
        if self.success:
            return {"success": True}
        return {
            "success": False,
            "error": self.error,
            "code": self.failure.value if self.failure else None,
        }
