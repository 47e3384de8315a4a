"""
Интеграционные тесты приема заявок через API
"""
import json


LEAD = {
    "name": "Иван",
    "phone": "+79001234567",
    "workType": "Грузчики",
    "comment": "Нужно 5 человек на завтра",
    "sourceUrl": "https://example.ru/services/warehouse/gruzchiki",
    "formName": "Страница услуги",
    "serviceName": "Грузчики",
}


def configure_telegram(admin_client):
    response = admin_client.put(
        "/api/admin/telegram-settings",
        json={"botToken": " 123:ABC ", "chatId": "-100500"},
    )
    assert response.json() == {"success": True}


class TestLeadsApi:

    def test_missing_required_fields(self, test_client, telegram_transport):
        response = test_client.post("/api/leads", json={"name": "  ", "phone": ""})

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "error": "Имя и телефон обязательны",
            "code": "validation_failed",
        }
        assert telegram_transport.call_count == 0

    def test_not_configured_outside_production(self, test_client, telegram_transport):
        """Без настроек бота вне production заявка принимается без отправки"""
        response = test_client.post("/api/leads", json=LEAD)

        assert response.json() == {"success": True}
        assert telegram_transport.call_count == 0

    def test_delivered_with_admin_settings(self, admin_client, telegram_transport):
        configure_telegram(admin_client)

        response = admin_client.post("/api/leads", json=LEAD)

        assert response.json() == {"success": True}
        assert telegram_transport.call_count == 1
        request = telegram_transport.requests[0]
        assert request.url.path == "/bot123:ABC/sendMessage"
        payload = json.loads(request.content)
        assert payload["chat_id"] == "-100500"
        assert payload["parse_mode"] == "Markdown"
        assert "👤 *Имя:* Иван" in payload["text"]

    def test_delivery_failure(self, admin_client, telegram_transport):
        configure_telegram(admin_client)
        telegram_transport.status_code = 500

        response = admin_client.post("/api/leads", json=LEAD)

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "error": "Ошибка отправки сообщения",
            "code": "delivery_failed",
        }

    def test_malformed_body_is_validation_failure(self, test_client, telegram_transport):
        response = test_client.post("/api/leads", json={"name": ["Иван"], "phone": "1"})

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "error": "Имя и телефон обязательны",
            "code": "validation_failed",
        }
        assert telegram_transport.call_count == 0

    def test_long_free_form_fields_are_accepted(self, admin_client, telegram_transport):
        configure_telegram(admin_client)
        lead = dict(
            LEAD,
            phone="+7 900 123-45-67 (мобильный), +7 495 123-45-67 доб. 12",
            comment="Подробности заказа. " * 400,
            sourceUrl="https://example.ru/services/warehouse/gruzchiki?" + "utm=1&" * 300,
        )

        response = admin_client.post("/api/leads", json=lead)

        assert response.json() == {"success": True}
        payload = json.loads(telegram_transport.requests[0].content)
        assert "\\+7 900 123\\-45\\-67 \\(мобильный\\), \\+7 495 123\\-45\\-67 доб\\. 12" in payload["text"]
        assert len(payload["text"]) <= 4096
