"""
Утилиты для работы с текстом.
Включает функции для безопасной вставки пользовательского ввода в сообщения Telegram.
"""
import re

# Символы, которые Telegram трактует как разметку
MARKDOWN_RESERVED_CHARS = "_*[]()~`>#+=|{}.!-"

_MARKDOWN_RESERVED_RE = re.compile(r"([_*\[\]()~`>#+=|{}.!\-])")


def escape_markdown(text: str) -> str:
    """
    Экранирует служебные символы разметки обратным слэшем.

    Args:
        text: Исходный текст

    Returns:
        Текст, в котором перед каждым служебным символом стоит "\\"

    Example:
        >>> escape_markdown("ООО (Тест) - 1.5")
        'ООО \\\\(Тест\\\\) \\\\- 1\\\\.5'
    """
    if not isinstance(text, str):
        text = str(text)

    return _MARKDOWN_RESERVED_RE.sub(r"\\\1", text)
