"""
Сборка видимого каталога: статические услуги + изменения из админ-панели.

Все функции чистые: на вход каталог и словарь изменений, без обращения к хранилищу.
Правила:
- изменение накладывается на базовую услугу поверх, незаданные поля берутся из базы;
- услуга с deleted=True исключается отовсюду;
- изменения без базовой услуги становятся "виртуальными" услугами и идут после
  базовых, упорядоченные по (created_at, id).
"""
from dataclasses import replace
from typing import Iterable, List, Optional

from src.domain.entities.catalog import (
    DEFAULT_NEW_SERVICE_TITLE,
    Catalog,
    OverridesMap,
    Service,
    ServiceOverride,
    StaticPath,
)


def _merge(base: Service, override: Optional[ServiceOverride]) -> Service:
    if override is None:
        return base
    return replace(base, **override.present_fields())


def _virtual_service(override: ServiceOverride) -> Service:
    """Услуга, созданная в админке (нет в статическом каталоге)"""
    return Service(
        id=override.id,
        slug=override.slug,
        title=override.title or DEFAULT_NEW_SERVICE_TITLE,
        description=override.description or "",
        category_id=override.category_id or "",
        price=override.price,
        full_description=override.full_description,
        seo_text=override.seo_text,
        images=override.images,
        pricing_table=override.pricing_table,
        show_order_form=override.show_order_form,
    )


def _virtual_overrides(catalog: Catalog, overrides: OverridesMap) -> List[ServiceOverride]:
    """Активные изменения без базовой услуги в детерминированном порядке"""
    virtual = [
        override
        for service_id, override in overrides.items()
        if isinstance(override, ServiceOverride)
        and not override.is_deleted
        and not catalog.has_service(service_id)
    ]
    return sorted(virtual, key=lambda o: (o.created_at or "", o.id))


def _iter_effective(catalog: Catalog, overrides: OverridesMap) -> Iterable[Service]:
    for base in catalog.services:
        override = overrides.get(base.id)
        if isinstance(override, ServiceOverride) and override.is_deleted:
            continue
        yield _merge(base, override if isinstance(override, ServiceOverride) else None)

    for override in _virtual_overrides(catalog, overrides):
        yield _virtual_service(override)


def list_all_services(catalog: Catalog, overrides: OverridesMap) -> List[Service]:
    """Все видимые услуги: базовые в порядке каталога, затем виртуальные"""
    return list(_iter_effective(catalog, overrides or {}))


def resolve_category_services(
    catalog: Catalog,
    overrides: OverridesMap,
    category_id: str,
) -> List[Service]:
    """
    Видимые услуги категории.

    Args:
        catalog: Статический каталог
        overrides: Изменения из админки по ID услуги
        category_id: ID категории

    Returns:
        Список услуг; пустой, если категории нет или в ней ничего не осталось
    """
    if not category_id:
        return []
    return [
        service
        for service in list_all_services(catalog, overrides)
        if service.category_id == category_id
    ]


def find_service_by_slug(
    catalog: Catalog,
    overrides: OverridesMap,
    category_slug: str,
    slug: str,
) -> Optional[Service]:
    """
    Видимая услуга по slug внутри категории.
    Уникальность slug не проверяется, возвращается первое совпадение.
    """
    category = catalog.get_category_by_slug(category_slug)
    if category is None or not slug:
        return None

    for service in resolve_category_services(catalog, overrides, category.id):
        if service.slug == slug:
            return service
    return None


def get_effective_service(
    catalog: Catalog,
    overrides: OverridesMap,
    service_id: str,
) -> Optional[Service]:
    """Видимая услуга по глобальному ID (редактирование в админке)"""
    overrides = overrides or {}
    override = overrides.get(service_id)
    if not isinstance(override, ServiceOverride):
        override = None
    if override is not None and override.is_deleted:
        return None

    base = catalog.get_service(service_id)
    if base is not None:
        return _merge(base, override)
    if override is not None:
        return _virtual_service(override)
    return None


def get_related_services(
    catalog: Catalog,
    overrides: OverridesMap,
    service: Service,
) -> List[Service]:
    """Другие видимые услуги той же категории"""
    return [
        other
        for other in resolve_category_services(catalog, overrides, service.category_id)
        if other.id != service.id
    ]


def list_static_paths(catalog: Catalog, overrides: OverridesMap) -> List[StaticPath]:
    """
    Пары category/slug для всех страниц услуг.
    Виртуальные услуги попадают только с заданными slug, title и известной категорией.
    """
    overrides = overrides or {}
    paths: List[StaticPath] = []

    for service in list_all_services(catalog, overrides):
        if not catalog.has_service(service.id):
            override = overrides[service.id]
            if not override.slug or not override.title or not override.category_id:
                continue
        category = catalog.get_category(service.category_id)
        if category is None or not service.slug:
            continue
        paths.append(StaticPath(category=category.slug, slug=service.slug))

    return paths
