"""
Outbound message delivery
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class SendResult:
    """Delivery result"""
    chat_id: int
    success: bool
    error_message: Optional[str] = None


class MessageSender(ABC):
    """Base class for outbound message transports"""

    @abstractmethod
    def send(self, chat_id: int, text: str) -> SendResult:
        """Send a text message to a chat"""
        pass

    def close(self) -> None:
        """Release transport resources"""
        pass


class ConsoleSender(MessageSender):
    """Log messages instead of sending them (for development/testing)"""

    def send(self, chat_id: int, text: str) -> SendResult:
        logger.info(f"[dry-run] to {chat_id}: {text}")
        return SendResult(chat_id=chat_id, success=True)
