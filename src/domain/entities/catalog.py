"""
Бизнес-сущности каталога услуг для domain слоя.
Статический каталог задается в коде, изменения админки хранятся как ServiceOverride.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


# Соответствие имен полей python → JSON (формат, который читает фронтенд)
_JSON_ALIASES = {
    "category_id": "categoryId",
    "full_description": "fullDescription",
    "seo_text": "seoText",
    "pricing_table": "pricingTable",
    "show_order_form": "showOrderForm",
    "created_at": "createdAt",
}

# Поля, которые может менять админ
OVERRIDE_CONTENT_FIELDS = (
    "slug",
    "title",
    "description",
    "price",
    "category_id",
    "full_description",
    "seo_text",
    "pricing_table",
    "images",
    "show_order_form",
)

_STRING_FIELDS = {"slug", "title", "description", "price", "category_id", "full_description", "seo_text"}

DEFAULT_NEW_SERVICE_TITLE = "Новая услуга"


def json_key(name: str) -> str:
    """Имя поля в JSON-представлении"""
    return _JSON_ALIASES.get(name, name)


@dataclass
class Category:
    """Категория услуг"""
    id: str
    slug: str
    name: str
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
        }


@dataclass
class PricingRow:
    """Строка таблицы цен"""
    name: str
    price: str
    unit: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["PricingRow"]:
        """Строка из JSON; некорректные записи пропускаются"""
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        price = data.get("price")
        if not isinstance(name, str) or not isinstance(price, str):
            return None
        unit = data.get("unit")
        return cls(name=name, price=price, unit=unit if isinstance(unit, str) else None)

    def to_dict(self) -> dict:
        result = {"name": self.name, "price": self.price}
        if self.unit is not None:
            result["unit"] = self.unit
        return result


@dataclass
class Service:
    """
    Услуга каталога.
    Этот же тип используется для эффективной услуги (после наложения изменений).
    """
    id: str
    slug: Optional[str]
    title: str
    description: str
    category_id: str
    price: Optional[str] = None
    full_description: Optional[str] = None
    seo_text: Optional[str] = None
    images: Optional[List[str]] = None
    pricing_table: Optional[List[PricingRow]] = None
    # Показывать форму заявки на странице услуги (по умолчанию да)
    show_order_form: Optional[bool] = None

    @property
    def order_form_enabled(self) -> bool:
        return self.show_order_form is not False

    def to_dict(self) -> dict:
        """Преобразование в словарь для JSON сериализации"""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "pricing_table":
                value = [row.to_dict() for row in value]
            result[json_key(f.name)] = value
        return result


@dataclass
class ServiceOverride:
    """
    Изменения услуги из админ-панели.
    Может ссылаться на услугу, которой нет в статическом каталоге (виртуальная услуга).
    Поле со значением None означает "не задано" и не перекрывает базовую услугу.
    """
    id: str
    slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    category_id: Optional[str] = None
    full_description: Optional[str] = None
    seo_text: Optional[str] = None
    pricing_table: Optional[List[PricingRow]] = None
    images: Optional[List[str]] = None
    show_order_form: Optional[bool] = None
    deleted: Optional[bool] = None
    # Момент первого изменения (ISO), ключ сортировки виртуальных услуг
    created_at: Optional[str] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted is True

    def has_identity_fields(self) -> bool:
        """Есть ли хотя бы одно из полей slug/title/description"""
        return bool(self.slug or self.title or self.description)

    def has_content(self) -> bool:
        """Задано ли хотя бы одно содержательное поле"""
        return any(getattr(self, name) is not None for name in OVERRIDE_CONTENT_FIELDS)

    def present_fields(self) -> Dict[str, Any]:
        """Заданные содержательные поля"""
        return {
            name: getattr(self, name)
            for name in OVERRIDE_CONTENT_FIELDS
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, service_id: str, data: Any) -> "ServiceOverride":
        """
        Создание из JSON-словаря.
        Поля неверного типа игнорируются, запись не отбрасывается целиком.
        """
        override = cls(id=service_id)
        if not isinstance(data, dict):
            return override

        for name in _STRING_FIELDS:
            value = data.get(json_key(name))
            if isinstance(value, str):
                setattr(override, name, value)

        images = data.get("images")
        if isinstance(images, list):
            override.images = [item for item in images if isinstance(item, str)]

        pricing = data.get("pricingTable")
        if isinstance(pricing, list):
            rows = [PricingRow.from_dict(item) for item in pricing]
            override.pricing_table = [row for row in rows if row is not None]

        for name in ("show_order_form", "deleted"):
            value = data.get(json_key(name))
            if isinstance(value, bool):
                setattr(override, name, value)

        created_at = data.get("createdAt")
        if isinstance(created_at, str):
            override.created_at = created_at

        return override

    def to_dict(self) -> dict:
        """Преобразование в словарь для JSON сериализации"""
        result: Dict[str, Any] = {"id": self.id}
        for f in fields(self):
            if f.name == "id":
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "pricing_table":
                value = [row.to_dict() for row in value]
            result[json_key(f.name)] = value
        return result


OverridesMap = Dict[str, ServiceOverride]


@dataclass
class StaticPath:
    """Пара category/slug для генерации страниц услуг"""
    category: str
    slug: str

    def to_dict(self) -> dict:
        return {"category": self.category, "slug": self.slug}


@dataclass
class Catalog:
    """Статический каталог: категории и услуги в порядке объявления"""
    categories: List[Category] = field(default_factory=list)
    services: List[Service] = field(default_factory=list)

    def get_category(self, category_id: str) -> Optional[Category]:
        return next((c for c in self.categories if c.id == category_id), None)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return next((c for c in self.categories if c.slug == slug), None)

    def get_service(self, service_id: str) -> Optional[Service]:
        return next((s for s in self.services if s.id == service_id), None)

    def has_service(self, service_id: str) -> bool:
        return self.get_service(service_id) is not None
