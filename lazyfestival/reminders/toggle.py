"""
Reminder toggle protocol

Turns "enable/disable lead time X for performance Y" into store mutations and
reports the subscriber's resulting set of enabled lead times.
"""

import logging

from ..database import get_session, SubscriptionRepository
from ..lead_times import LeadTime
from ..lineup import PerformanceResolver

logger = logging.getLogger(__name__)


class ReminderToggle:
    """Enable/disable per-performance reminders"""

    def __init__(self, resolver: PerformanceResolver):
        self.resolver = resolver

    def set_reminder(
        self,
        subscriber: int,
        performance: str,
        lead_minutes: int,
        enable: bool
    ) -> set[LeadTime]:
        """
        Enable or disable one lead-time reminder

        Args:
            subscriber: telegram chat id
            performance: band name
            lead_minutes: one of the LeadTime values
            enable: True to subscribe, False to unsubscribe

        Returns:
            every lead time the subscriber now holds for the performance

        Raises:
            ValueError: lead_minutes is not a supported lead time
            UnresolvedPerformance: enabling a reminder for an unknown band
            PersistenceError: the store failed; nothing was changed
        """
        lead = LeadTime(lead_minutes)

        with get_session() as session:
            if enable:
                held = SubscriptionRepository.find_by_subscriber_and_performance(
                    session, subscriber, performance
                )
                # Reuse the start time stamped on earlier reminders for this band
                due_at = held[0].due_at if held else self.resolver.resolve(performance)
                SubscriptionRepository.create(session, subscriber, performance, lead, due_at)
                logger.info(f"Reminder enabled: {subscriber} / {performance} / {lead.label}")
            else:
                removed = SubscriptionRepository.delete(session, subscriber, performance, lead)
                if removed:
                    logger.info(f"Reminder disabled: {subscriber} / {performance} / {lead.label}")

        return self.current_reminders(subscriber, performance)

    def current_reminders(self, subscriber: int, performance: str) -> set[LeadTime]:
        """Lead times currently enabled, read from the store"""
        with get_session() as session:
            subscriptions = SubscriptionRepository.find_by_subscriber_and_performance(
                session, subscriber, performance
            )
            return {s.lead_time for s in subscriptions}
