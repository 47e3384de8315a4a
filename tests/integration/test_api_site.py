"""
Интеграционные тесты публичных роутов контента сайта
"""
from src.infrastructure.services.default_site_content import DEFAULT_CONTACTS_CONFIG, DEFAULT_LOGO_CONFIG


class TestSiteApi:

    def test_health(self, test_client):
        data = test_client.get("/health").json()

        assert data["status"] == "ok"
        assert data["components"]["storage"] == "file"

    def test_page_text_requires_key(self, test_client):
        response = test_client.get("/api/admin/page-texts")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing key"}

    def test_missing_page_text_is_empty(self, test_client):
        data = test_client.get("/api/admin/page-texts", params={"key": "nothing"}).json()

        assert data == {"key": "nothing", "text": ""}

    def test_default_configs(self, test_client):
        assert test_client.get("/api/site/contacts").json() == DEFAULT_CONTACTS_CONFIG
        assert test_client.get("/api/site/logo").json() == DEFAULT_LOGO_CONFIG
        assert test_client.get("/api/site/consent").json()["consentEnabled"] is True
        assert test_client.get("/api/site/documents").json()["privacy"]
        assert test_client.get("/api/site/about").json()["showMission"] is True

    def test_config_saved_through_page_texts(self, admin_client):
        admin_client.post("/api/admin/page-texts", json={
            "key": "contacts_config",
            "text": '{"phoneNumber": "+7 (999) 111-22-33"}',
        })

        data = admin_client.get("/api/site/contacts").json()

        assert data["phoneNumber"] == "+7 (999) 111-22-33"
        assert data["email"] == DEFAULT_CONTACTS_CONFIG["email"]

    def test_corrupt_config_falls_back(self, admin_client):
        admin_client.post("/api/admin/page-texts", json={"key": "logo_config", "text": "{oops"})

        assert admin_client.get("/api/site/logo").json() == DEFAULT_LOGO_CONFIG


class TestAddressSearchApi:

    def test_short_query_skips_request(self, test_client, nominatim_transport):
        response = test_client.get("/api/maps/search", params={"q": "Тв"})

        assert response.json() == {"results": []}
        assert nominatim_transport.call_count == 0

    def test_results_are_mapped(self, test_client, nominatim_transport):
        response = test_client.get("/api/maps/search", params={"q": "Тверская"})

        results = response.json()["results"]
        assert results[0] == {"displayName": "Москва, Тверская улица, 1", "lat": "55.757", "lon": "37.615"}
        assert len(results) == 2
        request = nominatim_transport.requests[0]
        assert request.url.params["accept-language"] == "ru"
        assert request.url.params["limit"] == "5"
        assert "User-Agent" in request.headers

    def test_upstream_error_returns_empty(self, test_client, nominatim_transport):
        nominatim_transport.status_code = 503

        assert test_client.get("/api/maps/search", params={"q": "Тверская"}).json() == {"results": []}
