"""
Database module
"""

from .models import Base, Subscription
from .repository import (
    init_db,
    get_session,
    SubscriptionRepository,
)

__all__ = [
    "Base",
    "Subscription",
    "init_db",
    "get_session",
    "SubscriptionRepository",
]
