"""
Интеграционные тесты админ-панели: сессия, тексты, каталог, настройки
"""
import pytest

from src.config.settings import settings


class TestAdminAuth:

    @pytest.mark.parametrize("method,url", [
        ("get", "/api/admin/current-username"),
        ("post", "/api/admin/page-texts"),
        ("put", "/api/admin/services/loaders"),
        ("delete", "/api/admin/services/loaders"),
        ("put", "/api/home-admin/blocks"),
        ("get", "/api/admin/telegram-settings"),
        ("get", "/api/admin/logs"),
    ])
    def test_requires_session(self, test_client, method, url):
        response = getattr(test_client, method)(url)

        assert response.status_code == 401
        assert response.json() == {"detail": "Требуется авторизация"}

    def test_wrong_credentials(self, test_client):
        response = test_client.post("/api/admin/login", json={"username": settings.admin_username, "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Неверный логин или пароль"}

    def test_login_and_logout(self, admin_client):
        response = admin_client.get("/api/admin/current-username")
        assert response.json() == {"username": settings.admin_username}

        admin_client.post("/api/admin/logout")

        assert admin_client.get("/api/admin/current-username").status_code == 401

    def test_change_password(self, admin_client, data_dir):
        response = admin_client.post("/api/admin/change-password", json={
            "currentPassword": settings.admin_password,
            "newPassword": "new-secret-1",
        })
        assert response.json() == {"success": True}
        assert (data_dir / "admin-auth.json").exists()

        admin_client.post("/api/admin/logout")
        old = admin_client.post("/api/admin/login", json={
            "username": settings.admin_username, "password": settings.admin_password,
        })
        new = admin_client.post("/api/admin/login", json={
            "username": settings.admin_username, "password": "new-secret-1",
        })
        assert old.status_code == 401
        assert new.status_code == 200

    def test_change_password_short(self, admin_client):
        response = admin_client.post("/api/admin/change-password", json={
            "currentPassword": settings.admin_password,
            "newPassword": "123",
        })

        assert response.json()["success"] is False

    def test_change_username(self, admin_client):
        response = admin_client.post("/api/admin/change-username", json={"username": "manager"})

        assert response.json() == {"success": True}
        assert admin_client.get("/api/admin/current-username").json() == {"username": "manager"}


class TestAdminContent:

    def test_page_texts(self, admin_client):
        response = admin_client.post("/api/admin/page-texts", json={"key": "about_mission_text", "text": "Миссия"})
        assert response.json() == {"success": True}

        data = admin_client.get("/api/admin/page-texts", params={"key": "about_mission_text"}).json()

        assert data == {"key": "about_mission_text", "text": "Миссия"}

    def test_page_text_without_key(self, admin_client):
        response = admin_client.post("/api/admin/page-texts", json={"key": "", "text": "Миссия"})

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_home_admin_updates(self, admin_client):
        admin_client.put("/api/home-admin/blocks", json={"hero": False})
        admin_client.put("/api/home-admin/texts", json={"aboutTitle": "Кто мы"})
        admin_client.put("/api/home-admin/services", json=[
            {"id": "warehouse", "title": "Склад", "description": "Описание"},
        ])

        data = admin_client.get("/api/home-admin").json()

        assert data["blocks"]["hero"] is False
        assert data["texts"]["aboutTitle"] == "Кто мы"
        assert data["services"] == [{"id": "warehouse", "title": "Склад", "description": "Описание"}]

    def test_telegram_settings(self, admin_client):
        assert admin_client.get("/api/admin/telegram-settings").json() == {"botToken": "", "chatId": ""}

        admin_client.put("/api/admin/telegram-settings", json={"botToken": "123:ABC", "chatId": " -100 "})

        assert admin_client.get("/api/admin/telegram-settings").json() == {"botToken": "123:ABC", "chatId": "-100"}

    def test_logs_unavailable_with_file_storage(self, admin_client):
        data = admin_client.get("/api/admin/logs").json()

        assert data["available"] is False
        assert data["logs"] == []


class TestAdminServices:

    def test_get_service_for_editing(self, admin_client):
        data = admin_client.get("/api/admin/services/loaders").json()

        assert data["id"] == "loaders"
        assert data["slug"] == "gruzchiki"

    def test_unknown_service(self, admin_client):
        assert admin_client.get("/api/admin/services/missing").status_code == 404

    def test_overrides_map_lists_hidden_services(self, admin_client):
        admin_client.put("/api/admin/services/loaders", json={"title": "Опытные грузчики"})
        admin_client.delete("/api/admin/services/packers")

        overrides = admin_client.get("/api/admin/services-overrides").json()

        assert overrides["loaders"]["title"] == "Опытные грузчики"
        assert overrides["loaders"]["deleted"] is False
        assert overrides["packers"]["deleted"] is True

    def test_purge_restores_base_service(self, admin_client):
        admin_client.delete("/api/admin/services/packers")
        assert admin_client.get("/api/admin/services/packers").status_code == 404

        response = admin_client.post("/api/admin/services/packers/purge")

        assert response.json() == {"success": True}
        assert admin_client.get("/api/admin/services/packers").status_code == 200
        assert "packers" not in admin_client.get("/api/admin/services-overrides").json()
