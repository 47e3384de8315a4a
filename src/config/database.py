"""
Конфигурация базы данных
"""
from sqlalchemy.ext.asyncio import create_async_engine
from src.config.settings import settings


# Создание асинхронного движка с правильным connection pool
engine = create_async_engine(
    settings.database_url,
    pool_size=5,
    max_overflow=10,
    pool_pre_ping=True,  # Проверять подключение перед использованием
    pool_recycle=3600,  # Пересоздавать подключения каждый час
    echo=settings.debug,
)
