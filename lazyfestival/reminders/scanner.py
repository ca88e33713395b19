"""
Periodic scan for due reminders
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime

from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..config import settings
from ..database import get_session, Subscription, SubscriptionRepository
from ..delivery import MessageSender
from ..exceptions import PersistenceError
from ..lead_times import reminder_text

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Outcome of one scan"""
    ready: int = 0
    sent: int = 0
    failed: int = 0


class ReminderScanner:
    """Delivers ready reminders and consumes the delivered ones"""

    JOB_ID = "reminder_scan"

    def __init__(self, sender: MessageSender, interval_minutes: int = None):
        self.sender = sender
        self.interval_minutes = interval_minutes or settings.scan_interval_minutes
        self._lock = threading.Lock()

    def tick(self, now: datetime = None) -> TickResult:
        """
        Run one scan

        1. query ready subscriptions
        2. send each reminder
        3. delete the delivered ones; failed ones stay for the next tick
        """
        with self._lock:
            result = TickResult()

            try:
                with get_session() as session:
                    ready = SubscriptionRepository.find_ready(session, now)
            except PersistenceError as e:
                logger.error(f"Could not query ready reminders: {e}")
                return result

            result.ready = len(ready)
            for subscription in ready:
                if self._deliver(subscription):
                    result.sent += 1
                else:
                    result.failed += 1

            if result.ready:
                logger.info(f"Reminder scan: {result.sent}/{result.ready} sent, {result.failed} failed")
            return result

    def _deliver(self, subscription: Subscription) -> bool:
        text = reminder_text(subscription.lead_time, subscription.band)
        try:
            sent = self.sender.send(subscription.telegramid, text)
        except Exception as e:
            logger.error(f"Sending reminder to {subscription.telegramid} raised: {e}")
            return False

        if not sent.success:
            logger.warning(
                f"Reminder for '{subscription.band}' ({subscription.lead_time.label}) "
                f"to {subscription.telegramid} failed, retrying next scan: {sent.error_message}"
            )
            return False

        try:
            with get_session() as session:
                SubscriptionRepository.delete(
                    session, subscription.telegramid, subscription.band, subscription.min
                )
        except PersistenceError as e:
            # Stays ready, so the reminder will go out again next scan
            logger.error(f"Reminder sent but not consumed: {subscription!r}: {e}")
            return False

        logger.info(f"{subscription.lead_time.label} reminder for '{subscription.band}' sent to {subscription.telegramid}")
        return True

    def schedule(self, scheduler: BaseScheduler) -> None:
        """Register the scan as an interval job; runs never overlap"""
        scheduler.add_job(
            self.tick,
            trigger=IntervalTrigger(minutes=self.interval_minutes),
            id=self.JOB_ID,
            name="Reminder scan",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        logger.info(f"Reminder scan scheduled every {self.interval_minutes} minutes")
