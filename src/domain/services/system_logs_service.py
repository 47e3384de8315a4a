"""
Сервис для работы с системными логами
"""
from typing import List, Optional, Tuple

from sqlalchemy import and_, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.system_log import LogLevel, SystemLog
from ...infrastructure.database.models import SystemLog as SystemLogModel


class SystemLogsService:
    """Сервис для чтения системных логов"""

    async def get_logs(
        self,
        session: AsyncSession,
        page: int = 1,
        page_size: int = 50,
        level_filter: Optional[LogLevel] = None,
        search_query: Optional[str] = None,
        module_filter: Optional[str] = None,
        show_only_errors: bool = False
    ) -> Tuple[List[SystemLog], int]:
        """
        Получить логи с фильтрацией и пагинацией
        Возвращает (логи, общее_количество)
        """
        stmt = select(SystemLogModel)
        count_stmt = select(func.count(SystemLogModel.id))

        conditions = []

        if level_filter:
            conditions.append(SystemLogModel.level == level_filter.value)

        if show_only_errors:
            conditions.append(
                SystemLogModel.level.in_([LogLevel.ERROR.value, LogLevel.CRITICAL.value])
            )

        if search_query and search_query.strip():
            search_pattern = f"%{search_query.strip()}%"
            conditions.append(
                or_(
                    SystemLogModel.message.ilike(search_pattern),
                    SystemLogModel.module.ilike(search_pattern),
                )
            )

        if module_filter and module_filter.strip():
            conditions.append(SystemLogModel.module == module_filter.strip())

        if conditions:
            stmt = stmt.where(and_(*conditions))
            count_stmt = count_stmt.where(and_(*conditions))

        # Новые сначала
        stmt = stmt.order_by(desc(SystemLogModel.created_at), desc(SystemLogModel.id))
        stmt = stmt.offset((page - 1) * page_size).limit(page_size)

        logs_result = await session.execute(stmt)
        count_result = await session.execute(count_stmt)

        logs = [self._model_to_entity(model) for model in logs_result.scalars().all()]
        return logs, count_result.scalar() or 0

    def _model_to_entity(self, model: SystemLogModel) -> SystemLog:
        try:
            level = LogLevel(model.level)
        except ValueError:
            level = LogLevel.WARNING
        return SystemLog(
            id=model.id,
            level=level,
            message=model.message,
            module=model.module,
            extra_data=model.extra_data,
            created_at=model.created_at,
        )


system_logs_service = SystemLogsService()
