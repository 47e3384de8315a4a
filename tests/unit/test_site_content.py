"""
Тесты конфигурации блоков сайта, хранимой в текстах страниц
"""
import json

import pytest

from src.domain.services.site_content import SAVE_ERROR, SiteContentService, merge_with_defaults
from src.infrastructure.services.default_site_content import (
    DEFAULT_ABOUT_CONFIG,
    DEFAULT_CONSENT_CONFIG,
    DEFAULT_CONTACTS_CONFIG,
    DEFAULT_DOCUMENTS_CONFIG,
    DEFAULT_HOME_ADMIN,
    DEFAULT_LOGO_CONFIG,
)
from tests.mocks.storage_mock import InMemoryPageTextStore


def make_service(**texts):
    store = InMemoryPageTextStore({key: json.dumps(value, ensure_ascii=False) if not isinstance(value, str) else value
                                   for key, value in texts.items()})
    return SiteContentService(store), store


class TestMergeWithDefaults:

    def test_same_type_values_override(self):
        result = merge_with_defaults({"a": "x", "b": False}, {"a": "default", "b": True})
        assert result == {"a": "x", "b": False}

    def test_wrong_type_and_unknown_keys_are_dropped(self):
        result = merge_with_defaults({"a": 1, "extra": "x"}, {"a": "default"})
        assert result == {"a": "default"}

    def test_defaults_are_not_mutated(self):
        defaults = {"items": ["a"]}
        result = merge_with_defaults(None, defaults)
        result["items"].append("b")
        assert defaults == {"items": ["a"]}


class TestPageTexts:

    async def test_missing_key_returns_empty_string(self):
        service, _ = make_service()
        assert await service.get_page_text("about_mission_text") == ""

    async def test_update_and_read(self):
        service, store = make_service()

        result = await service.update_page_text("about_mission_text", "Наша миссия")

        assert result.success is True
        assert await service.get_page_text("about_mission_text") == "Наша миссия"

    async def test_update_with_empty_key_fails(self):
        service, store = make_service()

        result = await service.update_page_text("", "текст")

        assert result.success is False
        assert store.texts == {}

    async def test_store_failure(self):
        service = SiteContentService(InMemoryPageTextStore(fail_writes=True))

        result = await service.update_page_text("key", "текст")

        assert result.success is False
        assert result.error == SAVE_ERROR


class TestSiteConfigs:
    """Чтение конфигураций с откатом на значения по умолчанию"""

    async def test_missing_configs_return_defaults(self):
        service, _ = make_service()

        assert await service.get_contacts_config() == DEFAULT_CONTACTS_CONFIG
        assert await service.get_about_config() == DEFAULT_ABOUT_CONFIG
        assert await service.get_documents_config() == DEFAULT_DOCUMENTS_CONFIG
        assert await service.get_logo_config() == DEFAULT_LOGO_CONFIG
        assert await service.get_home_admin() == DEFAULT_HOME_ADMIN

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", "null", "   "])
    async def test_corrupt_json_returns_defaults(self, raw):
        service, _ = make_service(contacts_config=raw, home_admin=raw)

        assert await service.get_contacts_config() == DEFAULT_CONTACTS_CONFIG
        assert await service.get_home_admin() == DEFAULT_HOME_ADMIN

    async def test_contacts_partial_override(self):
        service, _ = make_service(contacts_config={"phoneNumber": "+7 (999) 000-00-00", "showMap": False, "email": 5})

        config = await service.get_contacts_config()

        assert config["phoneNumber"] == "+7 (999) 000-00-00"
        assert config["showMap"] is False
        assert config["email"] == DEFAULT_CONTACTS_CONFIG["email"]

    async def test_about_gallery_keeps_only_strings(self):
        service, _ = make_service(about_config={"galleryImages": ["/a.jpg", 3, None, "/b.jpg"], "showStats": False})

        config = await service.get_about_config()

        assert config["galleryImages"] == ["/a.jpg", "/b.jpg"]
        assert config["showStats"] is False

    async def test_documents_empty_sections_fall_back(self):
        service, _ = make_service(docs_config={
            "privacy": [],
            "offer": [{"title": "Свой раздел", "content": ["Текст"]}],
            "consentLinkText": "   ",
            "consentEnabled": False,
        })

        config = await service.get_documents_config()

        assert config["privacy"] == DEFAULT_DOCUMENTS_CONFIG["privacy"]
        assert config["offer"] == [{"title": "Свой раздел", "content": ["Текст"]}]
        assert config["consentLinkText"] == DEFAULT_CONSENT_CONFIG["consentLinkText"]
        assert config["consentEnabled"] is False

    async def test_consent_config_is_derived_from_documents(self):
        service, _ = make_service(docs_config={"consentLinkHref": "/policy"})

        consent = await service.get_consent_config()

        assert set(consent) == set(DEFAULT_CONSENT_CONFIG)
        assert consent["consentLinkHref"] == "/policy"

    async def test_logo_config(self):
        service, _ = make_service(logo_config={"enabled": False})

        config = await service.get_logo_config()

        assert config["enabled"] is False
        assert config["logoUrl"] == DEFAULT_LOGO_CONFIG["logoUrl"]


class TestHomeAdmin:
    """Тесты настроек главной страницы"""

    async def test_update_blocks_replaces_visibility(self):
        service, store = make_service()

        result = await service.update_home_blocks({"hero": False, "contacts": False})

        assert result.success is True
        data = await service.get_home_admin()
        assert data["blocks"]["hero"] is False
        assert data["blocks"]["contacts"] is False
        assert data["blocks"]["services"] is True
        assert "home_admin" in store.texts

    async def test_update_texts_is_partial(self):
        service, _ = make_service()
        await service.update_home_texts({"aboutTitle": "Кто мы"})

        await service.update_home_texts({"howTitle": "Этапы"})

        texts = (await service.get_home_admin())["texts"]
        assert texts["aboutTitle"] == "Кто мы"
        assert texts["howTitle"] == "Этапы"
        assert texts["servicesTitle"] == DEFAULT_HOME_ADMIN["texts"]["servicesTitle"]

    async def test_update_images_is_partial(self):
        service, _ = make_service()

        await service.update_home_images({"heroBg": "/hero.jpg"})

        images = (await service.get_home_admin())["images"]
        assert images["heroBg"] == "/hero.jpg"
        assert images["aboutBg"] == DEFAULT_HOME_ADMIN["images"]["aboutBg"]

    async def test_update_services_replaces_list(self):
        service, _ = make_service()

        await service.update_home_services([
            {"id": "warehouse", "title": "Склад", "description": "Описание", "link": "/services/warehouse"},
            {"id": "broken"},
        ])

        services = (await service.get_home_admin())["services"]
        assert services == [
            {"id": "warehouse", "title": "Склад", "description": "Описание", "link": "/services/warehouse"},
        ]

    async def test_empty_services_list_is_kept(self):
        service, _ = make_service()

        await service.update_home_services([])

        assert (await service.get_home_admin())["services"] == []

    async def test_save_failure(self):
        service = SiteContentService(InMemoryPageTextStore(fail_writes=True))

        result = await service.update_home_blocks({"hero": False})

        assert result.success is False
        assert result.error == SAVE_ERROR
