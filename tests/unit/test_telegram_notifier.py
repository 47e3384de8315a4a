"""
Тесты для TelegramNotifier и текста уведомления о заявке
"""
import json
from datetime import datetime, timezone

import httpx
import pytest

from src.domain.entities.site_settings import TelegramSettings
from src.infrastructure.notifications.telegram_notifier import (
    FIELD_LENGTH_LIMIT,
    TELEGRAM_MESSAGE_LIMIT,
    TelegramNotifier,
    format_lead_message,
)
from tests.fixtures.factories import LeadSubmissionFactory
from tests.mocks.storage_mock import RecordingTransport

# 12:34:56 UTC = 15:34:56 МСК
RECEIVED_AT = datetime(2026, 10, 19, 12, 34, 56, tzinfo=timezone.utc)


class TestFormatLeadMessage:
    """Тесты форматирования сообщения"""

    def test_full_message(self):
        lead = LeadSubmissionFactory(
            name="Иван",
            phone="+79001234567",
            work_type="Грузчики",
            comment="Нужно 5 человек",
            source_url="https://site.ru/services",
            form_name="Главная",
            service_name="Грузчики",
        )

        text = format_lead_message(lead, now=RECEIVED_AT)

        assert text == "\n".join([
            "🔔 *Новая заявка с сайта*",
            "",
            "📌 _Форма: Главная | Услуга: Грузчики | Страница: https://site\\.ru/services_",
            "",
            "👤 *Имя:* Иван",
            "📞 *Телефон:* \\+79001234567",
            "🔧 *Тип работ:* Грузчики",
            "",
            "💬 *Сообщение клиента:*",
            "Нужно 5 человек",
            "",
            "📅 *Дата:* 19\\.10\\.2026, 15:34:56",
        ])

    def test_minimal_message_omits_optional_lines(self):
        lead = LeadSubmissionFactory.create_minimal(name="Анна", phone="89001234567")

        text = format_lead_message(lead, now=RECEIVED_AT)

        assert "📌" not in text
        assert "Тип работ" not in text
        assert "Сообщение клиента" not in text
        assert text.startswith("🔔 *Новая заявка с сайта*\n\n👤 *Имя:* Анна")

    def test_context_line_with_partial_fields(self):
        lead = LeadSubmissionFactory.create_minimal(name="Анна", phone="1", form_name="Контакты")

        text = format_lead_message(lead, now=RECEIVED_AT)

        assert "📌 _Форма: Контакты_" in text

    def test_user_input_cannot_break_markup(self):
        """Служебные символы во вводе посетителя экранируются"""
        lead = LeadSubmissionFactory.create_minimal(
            name="*Bold* _it_ [link](http://x)",
            phone="+7 (900) 123-45-67",
            comment="`code` #tag {x} a|b ~s~ >q !",
        )

        text = format_lead_message(lead, now=RECEIVED_AT)

        assert "👤 *Имя:* \\*Bold\\* \\_it\\_ \\[link\\]\\(http://x\\)" in text
        assert "📞 *Телефон:* \\+7 \\(900\\) 123\\-45\\-67" in text
        assert "\\`code\\` \\#tag \\{x\\} a\\|b \\~s\\~ \\>q \\!" in text

    def test_long_comment_fits_message_limit(self):
        lead = LeadSubmissionFactory(comment="Нужны грузчики. " * 1000)

        text = format_lead_message(lead, now=RECEIVED_AT)

        assert len(text) <= TELEGRAM_MESSAGE_LIMIT
        assert "💬 *Сообщение клиента:*\nНужны грузчики\\. Нужны" in text
        assert text.endswith("…\n\n📅 *Дата:* 19\\.10\\.2026, 15:34:56")

    def test_long_phone_is_kept_and_clipped(self):
        phone = "+7 900 123-45-67 (мобильный), +7 495 123-45-67 доб. 12"
        lead = LeadSubmissionFactory.create_minimal(name="Иван", phone=phone * 10)

        text = format_lead_message(lead, now=RECEIVED_AT)

        phone_line = next(line for line in text.split("\n") if line.startswith("📞"))
        assert phone_line.startswith("📞 *Телефон:* \\+7 900 123\\-45\\-67 \\(мобильный\\)")
        assert len(phone_line) <= len("📞 *Телефон:* ") + FIELD_LENGTH_LIMIT
        assert not phone_line.endswith("\\…")


class TestTelegramNotifier:
    """Тесты отправки через Bot API"""

    @pytest.fixture
    def credentials(self):
        return TelegramSettings(bot_token="123:ABC", chat_id="-100500")

    async def test_payload_and_url(self, credentials):
        transport = RecordingTransport()
        notifier = TelegramNotifier(
            api_url="https://telegram.test/",
            timeout=1,
            transport=httpx.MockTransport(transport),
        )

        delivered = await notifier.send_message(credentials, "Тест")

        assert delivered is True
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://telegram.test/bot123:ABC/sendMessage"
        assert json.loads(request.content) == {
            "chat_id": "-100500",
            "text": "Тест",
            "parse_mode": "Markdown",
        }

    async def test_notify_new_lead_sends_formatted_text(self, credentials):
        transport = RecordingTransport()
        notifier = TelegramNotifier(api_url="https://telegram.test", transport=httpx.MockTransport(transport))
        lead = LeadSubmissionFactory(name="Пётр", phone="+79990000000")

        assert await notifier.notify_new_lead(lead, credentials) is True

        payload = json.loads(transport.requests[0].content)
        assert payload["text"].startswith("🔔 *Новая заявка с сайта*")
        assert "👤 *Имя:* Пётр" in payload["text"]

    @pytest.mark.parametrize("status_code", [400, 401, 429, 500])
    async def test_error_status_returns_false(self, credentials, status_code):
        transport = RecordingTransport(status_code=status_code, json_body={"ok": False})
        notifier = TelegramNotifier(api_url="https://telegram.test", transport=httpx.MockTransport(transport))

        assert await notifier.send_message(credentials, "Тест") is False

    async def test_connection_error_returns_false(self, credentials):
        transport = RecordingTransport(error=httpx.ConnectError("refused"))
        notifier = TelegramNotifier(api_url="https://telegram.test", transport=httpx.MockTransport(transport))

        assert await notifier.send_message(credentials, "Тест") is False
