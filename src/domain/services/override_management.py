"""
Сервис управления изменениями каталога из админ-панели.

Жизненный цикл записи: нет записи → активна → скрыта (deleted=True) → удалена из хранилища.
Скрытая запись удаляется из хранилища только явной командой purge_service.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..entities.action_result import ActionResult
from ..entities.catalog import (
    OVERRIDE_CONTENT_FIELDS,
    Catalog,
    OverridesMap,
    Service,
    ServiceOverride,
    json_key,
)
from ..interfaces.storage import OverrideStore, StorageError
from . import catalog_resolver
from ...infrastructure.logging.hybrid_logger import hybrid_logger

SAVE_ERROR = "Не удалось сохранить изменения"
READ_ERROR = "Не удалось прочитать сохраненные изменения, запись отменена"
EMPTY_ID_ERROR = "Не указан ID услуги"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_residual(override: ServiceOverride) -> bool:
    """Запись без единого содержательного поля и не скрытая"""
    return not override.is_deleted and not override.has_content()


class ServiceOverrideManagementService:
    """Чтение и изменение записей поверх статического каталога"""

    def __init__(self, store: OverrideStore, catalog: Catalog):
        self.store = store
        self.catalog = catalog

    async def get_overrides(self) -> OverridesMap:
        """Все записи изменений (в том числе скрытые)"""
        return await self.store.read_all()

    async def get_service(self, service_id: str) -> Optional[Service]:
        """Видимая услуга для формы редактирования"""
        overrides = await self.store.read_all()
        return catalog_resolver.get_effective_service(self.catalog, overrides, service_id)

    async def update_service(self, service_id: str, data: Dict[str, Any]) -> ActionResult:
        """
        Создание или изменение записи.

        Переданные поля заменяют текущие, null очищает поле.
        Запись всегда становится видимой (deleted=False), в том числе после удаления.

        Args:
            service_id: ID услуги (базовой или новой)
            data: Поля в JSON-формате (categoryId, fullDescription, ...)
        """
        if not service_id:
            return ActionResult.fail(EMPTY_ID_ERROR)

        data = data or {}
        overrides = await self._read_for_update()
        if overrides is None:
            return ActionResult.fail(READ_ERROR)
        current = overrides.get(service_id) or ServiceOverride(id=service_id)
        incoming = ServiceOverride.from_dict(service_id, data)

        for name in OVERRIDE_CONTENT_FIELDS:
            key = json_key(name)
            if key not in data:
                continue
            if data[key] is None:
                setattr(current, name, None)
            elif getattr(incoming, name) is not None:
                setattr(current, name, getattr(incoming, name))

        current.deleted = False
        if current.created_at is None:
            current.created_at = _utc_now_iso()
        overrides[service_id] = current

        result = await self._write(overrides)
        if result.success:
            await hybrid_logger.business(
                f"Услуга {service_id} изменена",
                {"module": "catalog", "service_id": service_id, "fields": sorted(k for k in data if k != "id")}
            )
        return result

    async def delete_service(self, service_id: str) -> ActionResult:
        """
        Скрытие услуги.

        Служебная запись новой услуги без slug, title и description удаляется сразу,
        в остальных случаях запись остается с deleted=True.
        """
        if not service_id:
            return ActionResult.fail(EMPTY_ID_ERROR)

        overrides = await self._read_for_update()
        if overrides is None:
            return ActionResult.fail(READ_ERROR)
        current = overrides.get(service_id)

        if (
            current is not None
            and not current.has_identity_fields()
            and not self.catalog.has_service(service_id)
        ):
            del overrides[service_id]
            action = "purged"
        else:
            record = current or ServiceOverride(id=service_id, created_at=_utc_now_iso())
            record.deleted = True
            overrides[service_id] = record
            action = "soft_deleted"

        result = await self._write(overrides)
        if result.success:
            await hybrid_logger.business(
                f"Услуга {service_id} удалена",
                {"module": "catalog", "service_id": service_id, "action": action}
            )
        return result

    async def purge_service(self, service_id: str) -> ActionResult:
        """Окончательное удаление записи из хранилища"""
        if not service_id:
            return ActionResult.fail(EMPTY_ID_ERROR)

        overrides = await self._read_for_update()
        if overrides is None:
            return ActionResult.fail(READ_ERROR)
        if service_id not in overrides:
            return ActionResult.ok()

        del overrides[service_id]
        result = await self._write(overrides)
        if result.success:
            await hybrid_logger.business(
                f"Запись услуги {service_id} удалена из хранилища",
                {"module": "catalog", "service_id": service_id, "action": "purged"}
            )
        return result

    async def _write(self, overrides: OverridesMap) -> ActionResult:
        compacted = {
            service_id: override
            for service_id, override in overrides.items()
            if not _is_residual(override)
        }
        try:
            await self.store.write_all(compacted)
        except StorageError as e:
            await hybrid_logger.error(f"Ошибка сохранения изменений каталога: {e}", {"module": "catalog"})
            return ActionResult.fail(SAVE_ERROR)
        return ActionResult.ok()

    async def _read_for_update(self) -> Optional[OverridesMap]:
        try:
            return await self.store.read_for_update()
        except StorageError as e:
            await hybrid_logger.error(f"Ошибка чтения изменений каталога перед записью: {e}", {"module": "catalog"})
            return None
