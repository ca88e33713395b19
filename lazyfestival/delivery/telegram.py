"""
Telegram Bot API sender
"""

import logging
from typing import Optional

import httpx

from ..config import settings
from ..exceptions import DeliveryError
from .sender import MessageSender, SendResult

logger = logging.getLogger(__name__)


class TelegramSender(MessageSender):
    """Send messages through the Bot API sendMessage method"""

    BASE_URL = "https://api.telegram.org"

    def __init__(
        self,
        token: str = None,
        timeout: float = None,
        client: Optional[httpx.Client] = None
    ):
        """
        Args:
            token: bot token issued by @BotFather
            timeout: request timeout in seconds
            client: preconfigured httpx client (tests)
        """
        self.token = token or settings.bot_token
        if not self.token:
            raise DeliveryError(
                "A Telegram bot token is required. "
                "Set BOT_TOKEN in the .env file."
            )

        self._client = client or httpx.Client(
            base_url=f"{self.BASE_URL}/bot{self.token}",
            timeout=timeout or settings.send_timeout_seconds,
        )

    def send(self, chat_id: int, text: str) -> SendResult:
        """
        Send a message (synchronous)

        Args:
            chat_id: target chat
            text: message body

        Returns:
            SendResult; failures, timeouts included, are reported, not raised
        """
        try:
            response = self._client.post("/sendMessage", json={"chat_id": chat_id, "text": text})
            data = response.json()
            if response.status_code != 200 or not data.get("ok"):
                error_msg = f"{response.status_code} - {data.get('description', 'unknown error')}"
                logger.error(f"Telegram sendMessage failed for {chat_id}: {error_msg}")
                return SendResult(chat_id=chat_id, success=False, error_message=error_msg)

            logger.debug(f"Message delivered to {chat_id}")
            return SendResult(chat_id=chat_id, success=True)

        except httpx.TimeoutException:
            error_msg = "request timed out"
            logger.error(f"Telegram sendMessage failed for {chat_id}: {error_msg}")
            return SendResult(chat_id=chat_id, success=False, error_message=error_msg)

        except (httpx.HTTPError, ValueError) as e:
            error_msg = str(e)
            logger.error(f"Telegram sendMessage failed for {chat_id}: {error_msg}")
            return SendResult(chat_id=chat_id, success=False, error_message=error_msg)

    def close(self) -> None:
        self._client.close()
