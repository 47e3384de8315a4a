"""
Публичные роуты каталога услуг.
Видимый каталог собирается на каждый запрос из статических услуг и изменений админки.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from ....domain.entities.catalog import Catalog
from ....domain.services import catalog_resolver
from ....domain.services.override_management import ServiceOverrideManagementService
from ..dependencies import get_catalog, get_override_service

catalog_router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@catalog_router.get("/categories")
async def list_categories(catalog: Catalog = Depends(get_catalog)):
    """Категории услуг"""
    return {"categories": [category.to_dict() for category in catalog.categories]}


@catalog_router.get("/services")
async def list_services(
    catalog: Catalog = Depends(get_catalog),
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Все видимые услуги (меню, карта сайта)"""
    overrides = await override_service.get_overrides()
    services = catalog_resolver.list_all_services(catalog, overrides)
    return {"services": [service.to_dict() for service in services]}


@catalog_router.get("/paths")
async def list_static_paths(
    catalog: Catalog = Depends(get_catalog),
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Пары category/slug для генерации страниц услуг"""
    overrides = await override_service.get_overrides()
    paths = catalog_resolver.list_static_paths(catalog, overrides)
    return {"paths": [path.to_dict() for path in paths]}


@catalog_router.get("/{category_slug}")
async def get_category_page(
    category_slug: str,
    catalog: Catalog = Depends(get_catalog),
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Категория и ее видимые услуги"""
    category = catalog.get_category_by_slug(category_slug)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Категория не найдена")

    overrides = await override_service.get_overrides()
    services = catalog_resolver.resolve_category_services(catalog, overrides, category.id)
    return {
        "category": category.to_dict(),
        "services": [service.to_dict() for service in services],
    }


@catalog_router.get("/{category_slug}/{slug}")
async def get_service_page(
    category_slug: str,
    slug: str,
    catalog: Catalog = Depends(get_catalog),
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Страница услуги: услуга, категория и другие услуги категории"""
    overrides = await override_service.get_overrides()
    service = catalog_resolver.find_service_by_slug(catalog, overrides, category_slug, slug)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Услуга не найдена")

    category = catalog.get_category(service.category_id)
    related = catalog_resolver.get_related_services(catalog, overrides, service)
    return {
        "service": service.to_dict(),
        "category": category.to_dict() if category else None,
        "related": [item.to_dict() for item in related],
    }
