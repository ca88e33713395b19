"""
Performance time resolver
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..exceptions import UnresolvedPerformance
from .loader import Lineup, Performance

# How long the last act of a day is considered to be playing
LAST_SET_LENGTH = timedelta(hours=1)


def _as_aware(now: datetime) -> datetime:
    """Naive input is taken as UTC"""
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


class PerformanceResolver:
    """Name and time lookups over a loaded lineup"""

    def __init__(self, lineup: Lineup):
        self.lineup = lineup

    def find(self, name: str) -> Optional[Performance]:
        for day in self.lineup.days:
            for performance in day:
                if performance.name == name:
                    return performance
        return None

    def resolve(self, name: str) -> datetime:
        """Start time of the named performance; raises UnresolvedPerformance"""
        performance = self.find(name)
        if performance is None:
            raise UnresolvedPerformance(name)
        return performance.start

    def day_of(self, now: datetime) -> list[Performance]:
        """Performances on the festival day matching now's local date"""
        now = _as_aware(now)
        for day in self.lineup.days:
            local_now = now.astimezone(day[0].start.tzinfo)
            if local_now.date() == day[0].start.date():
                return list(day)
        return []

    def now_playing(self, now: datetime) -> Optional[Performance]:
        """
        The performance on stage at the given time

        A set lasts until the next start of the same day; the last set of a
        day lasts LAST_SET_LENGTH.
        """
        now = _as_aware(now)
        for day in self.lineup.days:
            for i, performance in enumerate(day):
                if i < len(day) - 1:
                    end = day[i + 1].start
                else:
                    end = performance.start + LAST_SET_LENGTH
                if performance.start < now < end:
                    return performance
        return None
