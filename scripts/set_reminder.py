"""
Enable, disable or show a subscriber's reminders for a band

Usage:
    python scripts/set_reminder.py --chat 42 --band "Alpha" --lead 30
    python scripts/set_reminder.py --chat 42 --band "Alpha" --lead 30 --disable
    python scripts/set_reminder.py --chat 42 --band "Alpha"
"""

import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

from lazyfestival.config import settings
from lazyfestival.database import init_db
from lazyfestival.exceptions import PersistenceError, UnresolvedPerformance
from lazyfestival.lead_times import LeadTime
from lazyfestival.lineup import PerformanceResolver, load_lineup
from lazyfestival.reminders import ReminderToggle


def main():
    parser = argparse.ArgumentParser(description="LazyFestival reminder toggle")
    parser.add_argument("--chat", type=int, required=True, help="Telegram chat id")
    parser.add_argument("--band", required=True, help="band name as in the lineup")
    parser.add_argument(
        "--lead",
        type=int,
        choices=[int(lead) for lead in LeadTime],
        help="lead time in minutes; omit to only show current reminders"
    )
    parser.add_argument("--disable", action="store_true", help="turn the reminder off")

    args = parser.parse_args()

    init_db(settings.database_url)
    lineup = load_lineup(settings.lineup_file, settings.lineup_year, settings.lineup_timezone)
    toggle = ReminderToggle(PerformanceResolver(lineup))

    try:
        if args.lead is None:
            enabled = toggle.current_reminders(args.chat, args.band)
        else:
            enabled = toggle.set_reminder(args.chat, args.band, args.lead, enable=not args.disable)
    except UnresolvedPerformance as e:
        print(f"Error: {e}")
        sys.exit(1)
    except PersistenceError as e:
        print(f"Error: could not update reminders: {e}")
        sys.exit(1)

    print(f"Reminders for '{args.band}' (chat {args.chat}):")
    for lead in LeadTime:
        mark = "✅" if lead in enabled else "⬜"
        print(f"  {mark} {lead.label}")


if __name__ == "__main__":
    main()
