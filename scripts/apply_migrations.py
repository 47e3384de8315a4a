#!/usr/bin/env python3
"""
Скрипт для применения миграций Alembic.

С флагом --import-files после миграций переносит данные файлового хранилища
(DATA_DIR) в базу данных: изменения каталога, тексты страниц, настройки Telegram
и учетные данные администратора.
"""
import asyncio
import os
import subprocess
import sys

sys.path.insert(0, os.getcwd())

from src.config.settings import settings
from src.infrastructure.storage import database_storage, file_storage


def apply_migrations() -> bool:
    """Применяем миграции Alembic"""
    print("🔧 Применяем миграции Alembic...")

    result = subprocess.run(
        ["alembic", "upgrade", "head"],
        capture_output=True, text=True, cwd=os.getcwd()
    )

    if result.returncode != 0:
        print("❌ Ошибка при применении миграций")
        print(result.stderr)
        return False

    print("✅ Миграции успешно применены")
    print(result.stdout)
    return True


def _read_page_texts() -> dict:
    document = file_storage.JsonDocument(settings.data_dir / file_storage.PAGE_TEXTS_FILE).load()
    if not isinstance(document, dict) or not isinstance(document.get("pageTexts"), dict):
        return {}
    return {key: value for key, value in document["pageTexts"].items() if isinstance(value, str)}


async def import_file_storage() -> None:
    """Перенос данных из JSON-файлов в базу данных"""
    print(f"📦 Переносим данные из {settings.data_dir}...")

    overrides = await file_storage.FileOverrideStore(settings.data_dir).read_for_update()
    if overrides:
        await database_storage.DatabaseOverrideStore().write_all(overrides)
    print(f"   изменения каталога: {len(overrides)}")

    page_texts = _read_page_texts()
    text_store = database_storage.DatabasePageTextStore()
    for key, value in page_texts.items():
        await text_store.write(key, value)
    print(f"   тексты страниц: {len(page_texts)}")

    telegram_settings = await file_storage.FileTelegramSettingsStore(settings.data_dir).get()
    if telegram_settings:
        await database_storage.DatabaseTelegramSettingsStore().put(telegram_settings)
        print("   настройки Telegram перенесены")

    credentials = await file_storage.FileAdminCredentialsStore(settings.data_dir).get()
    if credentials:
        await database_storage.DatabaseAdminCredentialsStore().put(credentials)
        print("   учетные данные администратора перенесены")


if __name__ == "__main__":
    if not apply_migrations():
        print("\n❌ Не удалось применить миграции")
        print("Проверьте DATABASE_URL и подключение к базе данных")
        sys.exit(1)

    if "--import-files" in sys.argv:
        asyncio.run(import_file_storage())
        print("\n🎉 Данные перенесены, установите STORAGE_BACKEND=database")
