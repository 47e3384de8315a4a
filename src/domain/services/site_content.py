"""
Конфигурация блоков сайта, сохраненная в текстах страниц как JSON.

Сохраненное значение накладывается на значения по умолчанию поле за полем:
поле неверного типа или поврежденный JSON заменяются значением по умолчанию.
"""
import copy
import json
import logging
from typing import Any, Dict, List, Optional

from ..entities.action_result import ActionResult
from ..interfaces.storage import PageTextStore, StorageError
from ...infrastructure.logging.hybrid_logger import hybrid_logger
from ...infrastructure.services.default_site_content import (
    ABOUT_CONFIG_KEY,
    CONTACTS_CONFIG_KEY,
    DEFAULT_ABOUT_CONFIG,
    DEFAULT_CONSENT_CONFIG,
    DEFAULT_CONTACTS_CONFIG,
    DEFAULT_DOCUMENTS_CONFIG,
    DEFAULT_HOME_ADMIN,
    DEFAULT_LOGO_CONFIG,
    DOCS_CONFIG_KEY,
    HOME_ADMIN_KEY,
    LOGO_CONFIG_KEY,
)

SAVE_ERROR = "Не удалось сохранить изменения"

logger = logging.getLogger(__name__)


def merge_with_defaults(raw: Any, defaults: Dict[str, Any]) -> Dict[str, Any]:
    """
    Значения по умолчанию, перекрытые полями raw того же типа.
    Ключи, которых нет в defaults, отбрасываются.
    """
    result = copy.deepcopy(defaults)
    if not isinstance(raw, dict):
        return result
    for key, default in defaults.items():
        value = raw.get(key)
        if value is not None and type(value) is type(default):
            result[key] = copy.deepcopy(value)
    return result


def _string_list(value: Any) -> List[str]:
    return [item for item in value if isinstance(item, str)]


def _doc_sections(value: Any) -> Optional[List[dict]]:
    """Разделы документа {title, content[]}; None если список пустой или неверный"""
    if not isinstance(value, list):
        return None
    sections = [
        {"title": item["title"], "content": _string_list(item.get("content") or [])}
        for item in value
        if isinstance(item, dict) and isinstance(item.get("title"), str)
        and isinstance(item.get("content", []), list)
    ]
    return sections or None


def _home_services(value: Any) -> Optional[List[dict]]:
    if not isinstance(value, list):
        return None
    items = []
    for item in value:
        if not isinstance(item, dict):
            continue
        if not all(isinstance(item.get(field), str) for field in ("id", "title", "description")):
            continue
        service = {"id": item["id"], "title": item["title"], "description": item["description"]}
        if isinstance(item.get("link"), str):
            service["link"] = item["link"]
        items.append(service)
    return items


class SiteContentService:
    """Чтение и изменение конфигурации блоков сайта"""

    def __init__(self, store: PageTextStore):
        self.store = store

    async def get_page_text(self, key: str) -> str:
        """Текст страницы по ключу, пустая строка если его нет"""
        return await self.store.read(key)

    async def update_page_text(self, key: str, text: str) -> ActionResult:
        if not key:
            return ActionResult.fail("Не указан ключ текста")
        try:
            await self.store.write(key, text)
        except StorageError as e:
            await hybrid_logger.error(f"Ошибка сохранения текста {key}: {e}", {"module": "site"})
            return ActionResult.fail(SAVE_ERROR)
        await hybrid_logger.business(f"Текст страницы {key} обновлен", {"module": "site", "key": key})
        return ActionResult.ok()

    async def _load_json(self, key: str) -> Any:
        text = await self.store.read(key)
        if not text or not text.strip():
            return None
        try:
            return json.loads(text)
        except ValueError:
            logger.warning(f"Поврежденный JSON в тексте страницы {key}, используются значения по умолчанию")
            return None

    async def get_contacts_config(self) -> Dict[str, Any]:
        """Страница контактов"""
        return merge_with_defaults(await self._load_json(CONTACTS_CONFIG_KEY), DEFAULT_CONTACTS_CONFIG)

    async def get_about_config(self) -> Dict[str, Any]:
        """Страница "О компании": видимость блоков и фотогалерея"""
        config = merge_with_defaults(await self._load_json(ABOUT_CONFIG_KEY), DEFAULT_ABOUT_CONFIG)
        config["galleryImages"] = _string_list(config["galleryImages"])
        return config

    async def get_documents_config(self) -> Dict[str, Any]:
        """
        Политика конфиденциальности, оферта и подпись чекбокса согласия.
        Пустые списки разделов и пустые строки заменяются значениями по умолчанию.
        """
        raw = await self._load_json(DOCS_CONFIG_KEY)
        config = merge_with_defaults(raw, DEFAULT_DOCUMENTS_CONFIG)
        if not isinstance(raw, dict):
            return config

        for key in ("privacy", "offer"):
            config[key] = _doc_sections(raw.get(key)) or copy.deepcopy(DEFAULT_DOCUMENTS_CONFIG[key])

        for key, default in DEFAULT_CONSENT_CONFIG.items():
            if isinstance(default, str) and not config[key].strip():
                config[key] = default
        return config

    async def get_consent_config(self) -> Dict[str, Any]:
        """Чекбокс согласия на обработку персональных данных в формах заявки"""
        documents = await self.get_documents_config()
        return {key: documents[key] for key in DEFAULT_CONSENT_CONFIG}

    async def get_logo_config(self) -> Dict[str, Any]:
        return merge_with_defaults(await self._load_json(LOGO_CONFIG_KEY), DEFAULT_LOGO_CONFIG)

    async def get_home_admin(self) -> Dict[str, Any]:
        """Главная страница: блоки, тексты, фоновые изображения и карточки услуг"""
        raw = await self._load_json(HOME_ADMIN_KEY)
        if not isinstance(raw, dict):
            return copy.deepcopy(DEFAULT_HOME_ADMIN)

        services = _home_services(raw.get("services"))
        return {
            "blocks": merge_with_defaults(raw.get("blocks"), DEFAULT_HOME_ADMIN["blocks"]),
            "texts": merge_with_defaults(raw.get("texts"), DEFAULT_HOME_ADMIN["texts"]),
            "images": merge_with_defaults(raw.get("images"), DEFAULT_HOME_ADMIN["images"]),
            "services": services if services is not None else copy.deepcopy(DEFAULT_HOME_ADMIN["services"]),
        }

    async def update_home_blocks(self, blocks: Dict[str, bool]) -> ActionResult:
        """Полная замена видимости блоков главной"""
        data = await self.get_home_admin()
        data["blocks"] = merge_with_defaults(blocks, DEFAULT_HOME_ADMIN["blocks"])
        return await self._save_home(data, "blocks")

    async def update_home_texts(self, texts: Dict[str, str]) -> ActionResult:
        """Частичное обновление текстов главной"""
        data = await self.get_home_admin()
        data["texts"] = merge_with_defaults(texts, data["texts"])
        return await self._save_home(data, "texts")

    async def update_home_images(self, images: Dict[str, str]) -> ActionResult:
        """Частичное обновление фоновых изображений"""
        data = await self.get_home_admin()
        data["images"] = merge_with_defaults(images, data["images"])
        return await self._save_home(data, "images")

    async def update_home_services(self, services: List[dict]) -> ActionResult:
        """Полная замена карточек услуг на главной"""
        data = await self.get_home_admin()
        data["services"] = _home_services(services) or []
        return await self._save_home(data, "services")

    async def _save_home(self, data: Dict[str, Any], section: str) -> ActionResult:
        try:
            await self.store.write(HOME_ADMIN_KEY, json.dumps(data, ensure_ascii=False))
        except StorageError as e:
            await hybrid_logger.error(f"Ошибка сохранения главной страницы: {e}", {"module": "site"})
            return ActionResult.fail(SAVE_ERROR)
        await hybrid_logger.business(f"Главная страница: обновлен раздел {section}", {"module": "site"})
        return ActionResult.ok()
