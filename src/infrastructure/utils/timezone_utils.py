"""
Утилиты для работы с временными зонами.
Все даты в уведомлениях показываются в московском времени.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional

# Московское время UTC+3 (без перехода на летнее время)
MOSCOW_TZ = timezone(timedelta(hours=3))

# Форматы отображения времени
DATETIME_FORMATS = {
    "ru_locale": "%d.%m.%Y, %H:%M:%S",        # 28.09.2025, 12:34:56 (как ru-RU toLocaleString)
    "full_datetime": "%d.%m.%Y %H:%M",        # 28.09.2025 12:34
    "date_only": "%d.%m.%Y",                  # 28.09.2025
}


def get_datetime_format(format_type: str = "full_datetime") -> str:
    """Формат strftime по типу, с откатом на full_datetime"""
    return DATETIME_FORMATS.get(format_type, DATETIME_FORMATS["full_datetime"])


def to_moscow_time(dt: datetime) -> datetime:
    """
    Преобразует datetime в московское время.
    Datetime без timezone считается UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(MOSCOW_TZ)


def format_moscow_locale(dt: Optional[datetime] = None) -> str:
    """
    Дата и время в формате ru-RU для московской зоны.

    Args:
        dt: Момент времени, по умолчанию текущий

    Returns:
        Строка вида "19.10.2026, 14:05:33"
    """
    moment = to_moscow_time(dt or datetime.now(timezone.utc))
    return moment.strftime(get_datetime_format("ru_locale"))
