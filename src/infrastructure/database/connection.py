"""
Сессии базы данных для хранилища STORAGE_BACKEND=database
"""
import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.config.database import engine
from src.config.settings import settings
from src.infrastructure.database.models import Base

logger = logging.getLogger(__name__)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def create_tables() -> None:
    """
    Создание таблиц сайта для локальной разработки.
    В production схема создается миграциями: alembic upgrade head
    """
    if settings.is_production:
        logger.info("Production: таблицы не создаются автоматически, используйте alembic upgrade head")
        return

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Таблицы service_overrides, page_texts, site_settings, system_logs готовы")


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency FastAPI: сессия на время запроса"""
    async with async_session_factory() as session:
        yield session


async def get_db_health() -> dict:
    """Состояние подключения для /health (пароль в URL скрыт)"""
    safe_url = engine.url.render_as_string(hide_password=True)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Ошибка подключения к БД: {e}")
        return {"database": "disconnected", "engine": safe_url}
    return {"database": "connected", "engine": safe_url}
