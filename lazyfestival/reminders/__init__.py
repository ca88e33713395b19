"""
Reminder module: toggle protocol and periodic scanner
"""

from .scanner import ReminderScanner, TickResult
from .toggle import ReminderToggle

__all__ = [
    "ReminderScanner",
    "TickResult",
    "ReminderToggle",
]
