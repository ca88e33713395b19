"""
Outbound delivery module
"""

from .sender import MessageSender, SendResult, ConsoleSender
from .telegram import TelegramSender

__all__ = [
    "MessageSender",
    "SendResult",
    "ConsoleSender",
    "TelegramSender",
]
