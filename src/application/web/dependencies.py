"""
FastAPI зависимости: выбор хранилища и сборка сервисов.
Хранилище задается STORAGE_BACKEND (file | database).
"""
from fastapi import Depends

from ...config.settings import settings
from ...domain.entities.catalog import Catalog
from ...domain.interfaces.storage import (
    AdminCredentialsStore,
    OverrideStore,
    PageTextStore,
    TelegramSettingsStore,
)
from ...domain.services.lead_submission import LeadSubmissionService
from ...domain.services.override_management import ServiceOverrideManagementService
from ...domain.services.site_content import SiteContentService
from ...infrastructure.catalog.default_catalog import get_default_catalog
from ...infrastructure.notifications.telegram_notifier import TelegramNotifier
from ...infrastructure.services.address_search import AddressSearchService
from ...infrastructure.storage import database_storage, file_storage
from .password_auth import PasswordAuthService

_catalog = get_default_catalog()


def get_catalog() -> Catalog:
    return _catalog


def get_override_store() -> OverrideStore:
    if settings.use_database:
        return database_storage.DatabaseOverrideStore()
    return file_storage.FileOverrideStore(settings.data_dir)


def get_page_text_store() -> PageTextStore:
    if settings.use_database:
        return database_storage.DatabasePageTextStore()
    return file_storage.FilePageTextStore(settings.data_dir)


def get_telegram_settings_store() -> TelegramSettingsStore:
    if settings.use_database:
        return database_storage.DatabaseTelegramSettingsStore()
    return file_storage.FileTelegramSettingsStore(settings.data_dir)


def get_admin_credentials_store() -> AdminCredentialsStore:
    if settings.use_database:
        return database_storage.DatabaseAdminCredentialsStore()
    return file_storage.FileAdminCredentialsStore(settings.data_dir)


def get_telegram_notifier() -> TelegramNotifier:
    return TelegramNotifier()


def get_address_search_service() -> AddressSearchService:
    return AddressSearchService()


def get_override_service(
    store: OverrideStore = Depends(get_override_store),
    catalog: Catalog = Depends(get_catalog),
) -> ServiceOverrideManagementService:
    return ServiceOverrideManagementService(store, catalog)


def get_site_content_service(
    store: PageTextStore = Depends(get_page_text_store),
) -> SiteContentService:
    return SiteContentService(store)


def get_lead_service(
    settings_store: TelegramSettingsStore = Depends(get_telegram_settings_store),
    notifier: TelegramNotifier = Depends(get_telegram_notifier),
) -> LeadSubmissionService:
    return LeadSubmissionService(
        settings_store=settings_store,
        notifier=notifier,
        production=settings.is_production,
        default_bot_token=settings.telegram_bot_token,
        default_chat_id=settings.telegram_chat_id,
    )


def get_auth_service(
    store: AdminCredentialsStore = Depends(get_admin_credentials_store),
) -> PasswordAuthService:
    return PasswordAuthService(
        store,
        default_username=settings.admin_username,
        default_password=settings.admin_password,
    )
