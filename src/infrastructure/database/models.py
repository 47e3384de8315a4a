"""
Модели SQLAlchemy для базы данных.
Хранилище изменений каталога, текстов страниц и настроек сайта.
"""
from sqlalchemy import (
    Column, BigInteger, Boolean, String, DateTime, Text, Integer, Index, CheckConstraint
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func


Base = declarative_base()

# BIGINT не получает автоинкремент в SQLite
BigIntegerPK = BigInteger().with_variant(Integer, "sqlite")


class ServiceOverrideRecord(Base):
    """
    Изменения услуг из админ-панели.
    Одна строка на услугу, поля изменения хранятся JSON-документом.
    """
    __tablename__ = "service_overrides"

    service_id = Column(String(255), primary_key=True)
    data = Column(Text, nullable=False)  # JSON
    deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_overrides_deleted", "deleted"),
    )


class PageText(Base):
    """
    Тексты страниц и JSON-конфигурации блоков сайта
    """
    __tablename__ = "page_texts"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class SiteSetting(Base):
    """
    Служебные настройки сайта (Telegram, учетные данные админа).
    Отдельно от page_texts, чтобы не попадать в публичное чтение.
    """
    __tablename__ = "site_settings"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)  # JSON
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class SystemLog(Base):
    """
    Системные логи
    """
    __tablename__ = "system_logs"

    id = Column(BigIntegerPK, primary_key=True, autoincrement=True)
    level = Column(String(20), nullable=False)  # WARNING, ERROR, CRITICAL, BUSINESS
    message = Column(Text, nullable=False)
    module = Column(String(100), nullable=True)
    extra_data = Column(Text, nullable=True)  # JSON
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Ограничения
    __table_args__ = (
        CheckConstraint(
            "level IN ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'BUSINESS')",
            name="check_log_level"
        ),
        Index("idx_logs_level_created", "level", "created_at"),
        Index("idx_logs_created", "created_at"),
    )
