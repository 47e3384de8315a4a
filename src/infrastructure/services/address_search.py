"""
Подсказки адресов для карты на странице контактов (OpenStreetMap Nominatim).
"""
import logging
from typing import List, Optional

import httpx

from src.config.settings import settings

MIN_QUERY_LENGTH = 3
RESULTS_LIMIT = 5


class AddressSearchService:
    """Поиск адресов; при любой ошибке возвращается пустой список"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.nominatim_url
        self.user_agent = user_agent or settings.nominatim_user_agent
        self.timeout = timeout
        self._transport = transport
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def search(self, query: Optional[str]) -> List[dict]:
        """
        Args:
            query: Строка адреса (минимум 3 символа)

        Returns:
            Список {displayName, lat, lon}
        """
        if not query or len(query.strip()) < MIN_QUERY_LENGTH:
            return []

        params = {
            "format": "json",
            "q": query,
            "limit": RESULTS_LIMIT,
            "addressdetails": 1,
            "accept-language": "ru",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(
                    self.base_url,
                    params=params,
                    headers={"User-Agent": self.user_agent},
                )
            if not response.is_success:
                self._logger.warning(f"Nominatim вернул HTTP {response.status_code}")
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error(f"Ошибка поиска адреса: {e}")
            return []

        if not isinstance(data, list):
            return []

        return [
            {
                "displayName": item.get("display_name"),
                "lat": item.get("lat"),
                "lon": item.get("lon"),
            }
            for item in data
            if isinstance(item, dict) and item.get("display_name")
        ]
