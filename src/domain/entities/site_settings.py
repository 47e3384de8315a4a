"""
Служебные настройки сайта: канал уведомлений и учетные данные администратора.
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TelegramSettings:
    """Бот и чат для уведомлений о заявках"""
    bot_token: str
    chat_id: str

    @classmethod
    def from_dict(cls, data: Any) -> Optional["TelegramSettings"]:
        """Настройки из JSON; None если структура не подходит"""
        if not isinstance(data, dict):
            return None
        bot_token = data.get("botToken")
        chat_id = data.get("chatId")
        if isinstance(bot_token, str) and isinstance(chat_id, str):
            return cls(bot_token=bot_token, chat_id=chat_id)
        return None

    def to_dict(self) -> dict:
        return {"botToken": self.bot_token, "chatId": self.chat_id}


@dataclass
class AdminCredentials:
    """Учетные данные единственного администратора"""
    username: str
    password_hash: str

    @classmethod
    def from_dict(cls, data: Any) -> Optional["AdminCredentials"]:
        if not isinstance(data, dict):
            return None
        username = data.get("username")
        password_hash = data.get("passwordHash")
        if isinstance(username, str) and username and isinstance(password_hash, str) and password_hash:
            return cls(username=username, password_hash=password_hash)
        return None

    def to_dict(self) -> dict:
        return {"username": self.username, "passwordHash": self.password_hash}
