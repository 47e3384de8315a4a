"""
Роуты админ-панели: вход, учетные данные, тексты страниц, каталог услуг,
главная страница и настройки уведомлений.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ....domain.entities.site_settings import TelegramSettings
from ....domain.interfaces.storage import StorageError, TelegramSettingsStore
from ....domain.services.override_management import ServiceOverrideManagementService
from ....domain.services.site_content import SiteContentService
from ....infrastructure.logging.hybrid_logger import hybrid_logger
from ..auth import login_session, logout_session, require_admin_user
from ..dependencies import (
    get_auth_service,
    get_override_service,
    get_site_content_service,
    get_telegram_settings_store,
)
from ..password_auth import PasswordAuthService


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class ChangePasswordRequest(BaseModel):
    current_password: str = Field("", alias="currentPassword")
    new_password: str = Field("", alias="newPassword")

    class Config:
        populate_by_name = True


class ChangeUsernameRequest(BaseModel):
    username: str = ""


class PageTextRequest(BaseModel):
    key: str = Field(..., min_length=1)
    text: str


class TelegramSettingsRequest(BaseModel):
    bot_token: str = Field("", alias="botToken")
    chat_id: str = Field("", alias="chatId")

    class Config:
        populate_by_name = True


class HomeServiceItem(BaseModel):
    id: str
    title: str
    description: str
    link: Optional[str] = None


# Вход доступен без авторизации
auth_router = APIRouter(prefix="/api/admin", tags=["admin-auth"])

# Все остальные роуты только для авторизованного администратора
admin_router = APIRouter(tags=["admin"], dependencies=[Depends(require_admin_user)])


@auth_router.post("/login")
async def login(
    request: Request,
    login_request: LoginRequest,
    auth_service: PasswordAuthService = Depends(get_auth_service)
):
    """Вход администратора, сессия хранится в подписанной cookie"""
    if not await auth_service.authenticate(login_request.username, login_request.password):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "error": "Неверный логин или пароль"}
        )

    login_session(request, login_request.username)
    await hybrid_logger.business("Вход администратора", {"module": "auth", "username": login_request.username})
    return {"success": True}


@auth_router.post("/logout")
async def logout(request: Request):
    logout_session(request)
    return {"success": True}


@admin_router.get("/api/admin/current-username")
async def current_username(auth_service: PasswordAuthService = Depends(get_auth_service)):
    return {"username": await auth_service.current_username()}


@admin_router.post("/api/admin/change-password")
async def change_password(
    password_request: ChangePasswordRequest,
    auth_service: PasswordAuthService = Depends(get_auth_service)
):
    result = await auth_service.change_password(
        password_request.current_password,
        password_request.new_password
    )
    return result.to_dict()


@admin_router.post("/api/admin/change-username")
async def change_username(
    request: Request,
    username_request: ChangeUsernameRequest,
    auth_service: PasswordAuthService = Depends(get_auth_service)
):
    result = await auth_service.change_username(username_request.username)
    if result.success:
        login_session(request, username_request.username.strip())
    return result.to_dict()


@admin_router.post("/api/admin/page-texts")
async def update_page_text(
    page_text: PageTextRequest,
    content_service: SiteContentService = Depends(get_site_content_service)
):
    """Сохранение текста страницы или JSON-конфигурации блока"""
    result = await content_service.update_page_text(page_text.key, page_text.text)
    return result.to_dict()


@admin_router.get("/api/admin/services/{service_id}")
async def get_service(
    service_id: str,
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Видимая услуга для формы редактирования"""
    service = await override_service.get_service(service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Услуга не найдена")
    return service.to_dict()


@admin_router.put("/api/admin/services/{service_id}")
async def update_service(
    service_id: str,
    data: Dict[str, Any] = Body(...),
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Создание или изменение услуги (поля в JSON-формате: categoryId, seoText, ...)"""
    result = await override_service.update_service(service_id, data)
    return result.to_dict()


@admin_router.delete("/api/admin/services/{service_id}")
async def delete_service(
    service_id: str,
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    result = await override_service.delete_service(service_id)
    return result.to_dict()


@admin_router.post("/api/admin/services/{service_id}/purge")
async def purge_service(
    service_id: str,
    override_service: ServiceOverrideManagementService = Depends(get_override_service)
):
    """Окончательное удаление записи скрытой услуги"""
    result = await override_service.purge_service(service_id)
    return result.to_dict()


@admin_router.put("/api/home-admin/blocks")
async def update_home_blocks(
    blocks: Dict[str, bool] = Body(...),
    content_service: SiteContentService = Depends(get_site_content_service)
):
    result = await content_service.update_home_blocks(blocks)
    return result.to_dict()


@admin_router.put("/api/home-admin/texts")
async def update_home_texts(
    texts: Dict[str, str] = Body(...),
    content_service: SiteContentService = Depends(get_site_content_service)
):
    result = await content_service.update_home_texts(texts)
    return result.to_dict()


@admin_router.put("/api/home-admin/images")
async def update_home_images(
    images: Dict[str, str] = Body(...),
    content_service: SiteContentService = Depends(get_site_content_service)
):
    result = await content_service.update_home_images(images)
    return result.to_dict()


@admin_router.put("/api/home-admin/services")
async def update_home_services(
    services: List[HomeServiceItem] = Body(...),
    content_service: SiteContentService = Depends(get_site_content_service)
):
    items = [item.model_dump(exclude_none=True) for item in services]
    result = await content_service.update_home_services(items)
    return result.to_dict()


@admin_router.get("/api/admin/telegram-settings")
async def get_telegram_settings(
    settings_store: TelegramSettingsStore = Depends(get_telegram_settings_store)
):
    """Сохраненные настройки бота (пустые значения, если в админке ничего не задано)"""
    stored = await settings_store.get()
    if stored is None:
        return {"botToken": "", "chatId": ""}
    return stored.to_dict()


@admin_router.put("/api/admin/telegram-settings")
async def update_telegram_settings(
    settings_request: TelegramSettingsRequest,
    settings_store: TelegramSettingsStore = Depends(get_telegram_settings_store)
):
    telegram_settings = TelegramSettings(
        bot_token=settings_request.bot_token.strip(),
        chat_id=settings_request.chat_id.strip(),
    )
    try:
        await settings_store.put(telegram_settings)
    except StorageError as e:
        await hybrid_logger.error(f"Ошибка сохранения настроек Telegram: {e}", {"module": "leads"})
        return {"success": False, "error": "Не удалось сохранить изменения"}

    await hybrid_logger.business("Настройки Telegram обновлены", {"module": "leads"})
    return {"success": True}
