"""
Уведомления о заявках с сайта в чат Telegram.
Сообщение отправляется через Bot API (sendMessage) в разметке Markdown.
"""
import logging
from datetime import datetime
from typing import Optional

import httpx

from src.config.settings import settings
from src.domain.entities.lead import LeadSubmission
from src.domain.entities.site_settings import TelegramSettings
from src.infrastructure.logging.hybrid_logger import hybrid_logger
from src.infrastructure.utils.text_utils import escape_markdown
from src.infrastructure.utils.timezone_utils import format_moscow_locale

# Максимальная длина текста сообщения в Telegram Bot API
TELEGRAM_MESSAGE_LIMIT = 4096
# Короткие поля заявки (имя, телефон, форма, страница) в сообщении
FIELD_LENGTH_LIMIT = 200


def _clip(text: str, limit: int) -> str:
    """Обрезка экранированного текста без висящего обратного слэша в конце"""
    if len(text) <= limit:
        return text
    return text[:max(limit - 1, 0)].rstrip("\\") + "…"


def _field(value: str) -> str:
    return _clip(escape_markdown(value), FIELD_LENGTH_LIMIT)


def format_lead_message(lead: LeadSubmission, now: Optional[datetime] = None) -> str:
    """
    Текст уведомления о заявке.

    Все пользовательские значения экранируются, поэтому ввод посетителя
    не может сломать разметку сообщения. Длинные значения обрезаются,
    чтобы сообщение уложилось в TELEGRAM_MESSAGE_LIMIT.

    Args:
        lead: Заявка
        now: Момент получения заявки (по умолчанию текущий)

    Returns:
        Готовый текст для parse_mode=Markdown
    """
    lines = ["🔔 *Новая заявка с сайта*"]

    meta_parts = []
    if lead.form_name:
        meta_parts.append(f"Форма: {_field(lead.form_name)}")
    if lead.service_name:
        meta_parts.append(f"Услуга: {_field(lead.service_name)}")
    if lead.source_url:
        meta_parts.append(f"Страница: {_field(lead.source_url)}")
    if meta_parts:
        lines.append("")
        lines.append(f"📌 _{' | '.join(meta_parts)}_")

    lines.append("")
    lines.append(f"👤 *Имя:* {_field(lead.name)}")
    lines.append(f"📞 *Телефон:* {_field(lead.phone)}")

    if lead.work_type:
        lines.append(f"🔧 *Тип работ:* {_field(lead.work_type)}")

    footer = ["", f"📅 *Дата:* {escape_markdown(format_moscow_locale(now))}"]

    if lead.comment:
        lines.append("")
        lines.append("💬 *Сообщение клиента:*")
        available = TELEGRAM_MESSAGE_LIMIT - len("\n".join(lines + [""] + footer))
        lines.append(_clip(escape_markdown(lead.comment), available))

    return "\n".join(lines + footer)


class TelegramNotifier:
    """Отправка сообщений в чат через Telegram Bot API"""

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            api_url: Базовый адрес Bot API
            timeout: Таймаут запроса в секундах
            transport: Транспорт httpx (подменяется в тестах)
        """
        self.api_url = (api_url or settings.telegram_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.telegram_timeout_seconds
        self._transport = transport
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _send_url(self, bot_token: str) -> str:
        return f"{self.api_url}/bot{bot_token}/sendMessage"

    async def send_message(self, credentials: TelegramSettings, text: str) -> bool:
        """
        Одна попытка отправки, без повторов.

        Returns:
            True если Telegram ответил 2xx
        """
        payload = {
            "chat_id": credentials.chat_id,
            "text": text,
            "parse_mode": "Markdown",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self._send_url(credentials.bot_token), json=payload)

            if response.is_success:
                return True

            await hybrid_logger.error(
                f"Telegram API вернул ошибку: HTTP {response.status_code}",
                {"module": "leads", "status_code": response.status_code, "response": response.text[:500]}
            )
            return False

        except httpx.TimeoutException:
            await hybrid_logger.error("Таймаут Telegram API", {"module": "leads", "timeout": self.timeout})
            return False

        except httpx.HTTPError as e:
            await hybrid_logger.error(f"Ошибка соединения с Telegram API: {e}", {"module": "leads"})
            return False

    async def notify_new_lead(self, lead: LeadSubmission, credentials: TelegramSettings) -> bool:
        """Уведомление о новой заявке"""
        text = format_lead_message(lead)
        self._logger.debug(f"Отправка заявки в чат {credentials.chat_id}")
        return await self.send_message(credentials, text)
