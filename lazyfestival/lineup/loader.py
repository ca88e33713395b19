"""
Festival lineup loader
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Performance:
    """One lineup entry"""
    name: str
    start: datetime  # timezone aware
    stage: str = ""


@dataclass
class Lineup:
    """Performances ordered by start time and grouped by festival day"""
    performances: list[Performance] = field(default_factory=list)
    days: list[list[Performance]] = field(default_factory=list)

    @classmethod
    def from_performances(cls, performances: list[Performance]) -> "Lineup":
        ordered = sorted(performances, key=lambda p: p.start)

        days: list[list[Performance]] = []
        current_day: date = None
        for performance in ordered:
            day = performance.start.date()
            if day != current_day:
                days.append([])
                current_day = day
            days[-1].append(performance)

        return cls(performances=ordered, days=days)


def parse_entry(entry: dict, year: int, tz: ZoneInfo) -> Performance:
    """Parse a {"date": "July 12", "time": "20:00", "band": ..., "stage": ...} entry"""
    start = datetime.strptime(
        f"{year} {entry['date']} {entry['time']}", "%Y %B %d %H:%M"
    ).replace(tzinfo=tz)
    return Performance(
        name=entry["band"],
        start=start,
        stage=entry.get("stage", ""),
    )


def load_lineup(path: Path, year: int, timezone: str) -> Lineup:
    """
    Load the lineup file

    Args:
        path: JSON file with a list of lineup entries
        year: festival year, the file only carries month and day
        timezone: IANA name of the festival's local timezone

    Returns:
        Lineup
    """
    tz = ZoneInfo(timezone)
    entries = json.loads(Path(path).read_text(encoding="utf-8"))

    lineup = Lineup.from_performances([parse_entry(e, year, tz) for e in entries])
    logger.info(f"Loaded {len(lineup.performances)} performances over {len(lineup.days)} days from {path}")
    return lineup
