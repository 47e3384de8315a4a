"""
Прием заявок с сайта.
Заявка проверяется, форматируется и отправляется одним сообщением в чат Telegram.
Заявки нигде не сохраняются.
"""
from typing import Optional

from ..entities.lead import LeadFailure, LeadResult, LeadSubmission
from ..entities.site_settings import TelegramSettings
from ..interfaces.storage import TelegramSettingsStore
from ...infrastructure.logging.hybrid_logger import hybrid_logger
from ...infrastructure.notifications.telegram_notifier import TelegramNotifier

VALIDATION_ERROR = "Имя и телефон обязательны"
NOT_CONFIGURED_ERROR = "Сервис временно недоступен"
DELIVERY_ERROR = "Ошибка отправки сообщения"


class LeadSubmissionService:
    """
    Отправка заявки менеджерам.

    Настройки бота берутся из админки, незаполненные поля дополняются
    значениями из окружения (TELEGRAM_BOT_TOKEN / TELEGRAM_CHAT_ID).
    Если настроек нет совсем: в production это ошибка, в остальных
    окружениях заявка считается принятой без отправки.
    """

    def __init__(
        self,
        settings_store: TelegramSettingsStore,
        notifier: TelegramNotifier,
        production: bool,
        default_bot_token: str = "",
        default_chat_id: str = "",
    ):
        self.settings_store = settings_store
        self.notifier = notifier
        self.production = production
        self.default_bot_token = default_bot_token
        self.default_chat_id = default_chat_id

    async def resolve_credentials(self) -> Optional[TelegramSettings]:
        """Итоговые настройки бота или None, если чего-то не хватает"""
        stored = await self.settings_store.get()
        bot_token = (stored.bot_token if stored else "") or self.default_bot_token
        chat_id = (stored.chat_id if stored else "") or self.default_chat_id
        if not bot_token or not chat_id:
            return None
        return TelegramSettings(bot_token=bot_token, chat_id=chat_id)

    async def submit(self, lead: LeadSubmission) -> LeadResult:
        """
        Обработка заявки.

        Returns:
            LeadResult: успех или причина отказа (исключения наружу не выходят)
        """
        if not lead.is_valid():
            return LeadResult.fail(LeadFailure.VALIDATION_FAILED, VALIDATION_ERROR)

        credentials = await self.resolve_credentials()
        if credentials is None:
            if self.production:
                await hybrid_logger.error(
                    "Telegram не настроен, заявка не может быть доставлена",
                    {"module": "leads", "form": lead.form_name}
                )
                return LeadResult.fail(LeadFailure.NOT_CONFIGURED, NOT_CONFIGURED_ERROR)

            await hybrid_logger.warning(
                "Telegram не настроен, отправка заявки пропущена (не production)",
                {"module": "leads", "form": lead.form_name}
            )
            return LeadResult.ok(delivered=False)

        try:
            delivered = await self.notifier.notify_new_lead(lead, credentials)
        except Exception as e:
            await hybrid_logger.error(f"Неожиданная ошибка отправки заявки: {e}", {"module": "leads"})
            delivered = False

        if not delivered:
            return LeadResult.fail(LeadFailure.DELIVERY_FAILED, DELIVERY_ERROR)

        await hybrid_logger.business(
            "Заявка с сайта отправлена в Telegram",
            {
                "module": "leads",
                "form": lead.form_name,
                "service": lead.service_name,
                "source_url": lead.source_url,
            }
        )
        return LeadResult.ok()
