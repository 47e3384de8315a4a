"""
Роуты для просмотра системных логов (только для администраторов)
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ....config.settings import settings
from ....domain.entities.system_log import LogLevel
from ....domain.services.system_logs_service import system_logs_service
from ....infrastructure.database.connection import get_session
from ..auth import require_admin_user

logs_router = APIRouter(
    prefix="/api/admin/logs",
    tags=["logs"],
    dependencies=[Depends(require_admin_user)]
)


@logs_router.get("")
async def logs_list(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=10, le=500),
    level: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    module: Optional[str] = Query(None),
    errors_only: bool = Query(False),
    session: AsyncSession = Depends(get_session)
):
    """
    Последние записи system_logs.
    При файловом хранилище логи пишутся только в консоль.
    """
    if not settings.use_database:
        return {"logs": [], "total": 0, "page": page, "available": False}

    level_filter = None
    if level:
        try:
            level_filter = LogLevel(level.upper())
        except ValueError:
            level_filter = None

    logs, total_count = await system_logs_service.get_logs(
        session,
        page=page,
        page_size=page_size,
        level_filter=level_filter,
        search_query=search,
        module_filter=module,
        show_only_errors=errors_only
    )

    return {
        "logs": [log.to_dict() for log in logs],
        "total": total_count,
        "page": page,
        "available": True,
    }
