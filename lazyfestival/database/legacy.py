"""
Import of the old alerts.json file

The first version of the bot kept all reminders in memory and dumped them to
alerts.json: one record per (chat, band) with a boolean flag per lead time.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from sqlalchemy.orm import Session

from ..lead_times import LeadTime
from .repository import SubscriptionRepository

logger = logging.getLogger(__name__)


LEGACY_FLAGS = {
    "Min5": LeadTime.MIN_5,
    "Min15": LeadTime.MIN_15,
    "Min30": LeadTime.MIN_30,
    "Hour1": LeadTime.HOUR_1,
    "Hour2": LeadTime.HOUR_2,
}


def parse_go_time(raw: str) -> datetime:
    """Parse an RFC 3339 timestamp as written by Go's json.Marshal"""
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return datetime.fromisoformat(raw)


def parse_legacy_alerts(data: dict) -> list[tuple[int, str, LeadTime, datetime]]:
    """
    Flatten the legacy layout into (subscriber, band, lead, start) tuples

    Records without a band, with an unset start time or with an unreadable
    start time are skipped.
    """
    rows = []
    for chat_id, alerts in data.items():
        for alert in alerts or []:
            band = alert.get("Band")
            raw_time = alert.get("Time")
            if not band or not raw_time or raw_time.startswith("0001-01-01"):
                logger.warning(f"Skipping legacy alert without band or time: {alert}")
                continue

            try:
                start = parse_go_time(raw_time)
            except ValueError:
                logger.warning(f"Skipping legacy alert with unreadable time: {alert}")
                continue

            for flag, lead in LEGACY_FLAGS.items():
                if alert.get(flag):
                    rows.append((int(chat_id), band, lead, start))
    return rows


def import_legacy_alerts(session: Session, path: Path) -> int:
    """Create a subscription per enabled flag; returns the number of new rows"""
    data = json.loads(Path(path).read_text(encoding="utf-8"))

    created = 0
    for subscriber, band, lead, start in parse_legacy_alerts(data):
        if SubscriptionRepository.get(session, subscriber, band, lead):
            continue
        SubscriptionRepository.create(session, subscriber, band, lead, start)
        created += 1

    logger.info(f"Imported {created} reminders from {path}")
    return created
