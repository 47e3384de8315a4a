"""
Авторизация администратора сайта по логину и паролю.
Единственная учетная запись: сохраненная в хранилище или из переменных окружения.
"""
import hmac
from typing import Optional

import bcrypt

from ...domain.entities.action_result import ActionResult
from ...domain.entities.site_settings import AdminCredentials
from ...domain.interfaces.storage import AdminCredentialsStore, StorageError
from ...infrastructure.logging.hybrid_logger import hybrid_logger

MIN_PASSWORD_LENGTH = 6
MIN_USERNAME_LENGTH = 3


class PasswordAuthService:
    """Проверка и смена учетных данных администратора"""

    def __init__(self, store: AdminCredentialsStore, default_username: str, default_password: str):
        self.store = store
        self.default_username = default_username
        self.default_password = default_password

    @staticmethod
    def hash_password(password: str) -> str:
        """Хеширование пароля"""
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    @staticmethod
    def verify_password_hash(password: str, password_hash: str) -> bool:
        """Проверка пароля по bcrypt-хешу"""
        try:
            return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
        except ValueError:
            # Поврежденный хеш
            return False

    async def _stored(self) -> Optional[AdminCredentials]:
        return await self.store.get()

    async def current_username(self) -> str:
        stored = await self._stored()
        return stored.username if stored else self.default_username

    async def verify_password(self, password: str) -> bool:
        """Проверка пароля текущей учетной записи"""
        if not password:
            return False
        stored = await self._stored()
        if stored:
            return self.verify_password_hash(password, stored.password_hash)
        return hmac.compare_digest(password.encode('utf-8'), self.default_password.encode('utf-8'))

    async def authenticate(self, username: str, password: str) -> bool:
        """Проверка логина и пароля"""
        if not username or username != await self.current_username():
            await hybrid_logger.warning("Попытка входа с неверным логином", {"module": "auth"})
            return False
        if not await self.verify_password(password):
            await hybrid_logger.warning("Неверный пароль администратора", {"module": "auth"})
            return False
        return True

    async def change_password(self, current_password: str, new_password: str) -> ActionResult:
        """Смена пароля после проверки текущего"""
        if not await self.verify_password(current_password):
            return ActionResult.fail("Неверный текущий пароль")

        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            return ActionResult.fail(f"Новый пароль должен быть не короче {MIN_PASSWORD_LENGTH} символов")

        credentials = AdminCredentials(
            username=await self.current_username(),
            password_hash=self.hash_password(new_password),
        )
        result = await self._save(credentials)
        if result.success:
            await hybrid_logger.business("Пароль администратора изменен", {"module": "auth"})
        return result

    async def change_username(self, new_username: str) -> ActionResult:
        """Смена логина, пароль остается прежним"""
        new_username = (new_username or "").strip()
        if len(new_username) < MIN_USERNAME_LENGTH:
            return ActionResult.fail(f"Логин должен быть не короче {MIN_USERNAME_LENGTH} символов")

        stored = await self._stored()
        password_hash = stored.password_hash if stored else self.hash_password(self.default_password)
        result = await self._save(AdminCredentials(username=new_username, password_hash=password_hash))
        if result.success:
            await hybrid_logger.business("Логин администратора изменен", {"module": "auth", "username": new_username})
        return result

    async def _save(self, credentials: AdminCredentials) -> ActionResult:
        try:
            await self.store.put(credentials)
        except StorageError as e:
            await hybrid_logger.error(f"Ошибка сохранения учетных данных: {e}", {"module": "auth"})
            return ActionResult.fail("Не удалось сохранить изменения")
        return ActionResult.ok()
