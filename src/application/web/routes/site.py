"""
Публичные роуты контента сайта: тексты страниц, конфигурация блоков,
изменения каталога для клиентской части, подсказки адресов.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ....domain.services.override_management import ServiceOverrideManagementService
from ....domain.services.site_content import SiteContentService
from ....infrastructure.services.address_search import AddressSearchService
from ..dependencies import get_address_search_service, get_override_service, get_site_content_service

router = APIRouter(tags=["site"])


@router.get("/api/admin/page-texts")
async def get_page_text(
    key: Optional[str] = Query(None),
    content_service: SiteContentService = Depends(get_site_content_service)
):
    """Текст страницы по ключу (чтение публичное)"""
    if not key:
        return JSONResponse(status_code=400, content={"error": "Missing key"})
    text = await content_service.get_page_text(key)
    return {"key": key, "text": text}


@router.get("/api/admin/services-overrides")
async def get_services_overrides(
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Все изменения каталога, включая скрытые услуги"""
    overrides = await override_service.get_overrides()
    return {service_id: override.to_dict() for service_id, override in overrides.items()}


@router.get("/api/home-admin")
async def get_home_admin(content_service: SiteContentService = Depends(get_site_content_service)):
    return await content_service.get_home_admin()


@router.get("/api/site/contacts")
async def get_contacts(content_service: SiteContentService = Depends(get_site_content_service)):
    return await content_service.get_contacts_config()


@router.get("/api/site/about")
async def get_about(content_service: SiteContentService = Depends(get_site_content_service)):
    return await content_service.get_about_config()


@router.get("/api/site/documents")
async def get_documents(content_service: SiteContentService = Depends(get_site_content_service)):
    return await content_service.get_documents_config()


@router.get("/api/site/consent")
async def get_consent(content_service: SiteContentService = Depends(get_site_content_service)):
    """Подпись чекбокса согласия для форм заявки"""
    return await content_service.get_consent_config()


@router.get("/api/site/logo")
async def get_logo(content_service: SiteContentService = Depends(get_site_content_service)):
    return await content_service.get_logo_config()


@router.get("/api/maps/search")
async def search_address(
    q: Optional[str] = Query(None),
    search_service: AddressSearchService = Depends(get_address_search_service)
):
    """Подсказки адресов для карты контактов"""
    return {"results": await search_service.search(q)}
