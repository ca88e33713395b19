"""
Reminder lead times
"""

from datetime import timedelta
from enum import IntEnum


class LeadTime(IntEnum):
    """Minutes before a performance starts at which a reminder is due"""
    MIN_5 = 5
    MIN_15 = 15
    MIN_30 = 30
    HOUR_1 = 60
    HOUR_2 = 120

    @property
    def label(self) -> str:
        """Human readable label used in reminder messages"""
        return LEAD_TIME_LABELS[self]

    @property
    def delta(self) -> timedelta:
        return timedelta(minutes=int(self))


LEAD_TIME_LABELS = {
    LeadTime.MIN_5: "5 minutes",
    LeadTime.MIN_15: "15 minutes",
    LeadTime.MIN_30: "30 minutes",
    LeadTime.HOUR_1: "1 hour",
    LeadTime.HOUR_2: "2 hours",
}


def reminder_text(lead: LeadTime, performance: str) -> str:
    """Message sent to a subscriber when a reminder becomes due"""
    return f'🔔 {lead.label} until "{performance}"'
