from __future__ import annotations

import logging
from typing import Optional

import httpx


logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramClient:
    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        timeout: float = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.chat_id = chat_id
        self.url = f"{TELEGRAM_API_URL}/bot{bot_token}/sendMessage"
        self.client = httpx.Client(timeout=timeout, transport=transport)

    def send(self, message: str) -> bool:
        # httpx URL-encodes the query string; the text itself is sent as is
        try:
            response = self.client.get(self.url, params={"chat_id": self.chat_id, "text": message})
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Telegram send failed: %s", e)
            return False
        if not isinstance(data, dict):
            logger.error("Telegram API returned unexpected body: %r", data)
            return False
        if not data.get("ok"):
            logger.error("Telegram API error: %s", data.get("description", data))
            return False
        return True

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
