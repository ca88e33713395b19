"""
Move reminders from the old alerts.json file into the database

Usage:
    python scripts/import_legacy_alerts.py --file alerts.json
"""

import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

import logging
logging.basicConfig(level=logging.INFO, format="%(message)s")

from lazyfestival.config import settings
from lazyfestival.database import init_db, get_session
from lazyfestival.database.legacy import import_legacy_alerts


def main():
    parser = argparse.ArgumentParser(description="LazyFestival legacy alerts import")
    parser.add_argument("--file", type=Path, default=Path("alerts.json"), help="legacy alerts file")

    args = parser.parse_args()

    if not args.file.exists():
        print(f"File not found: {args.file}")
        sys.exit(1)

    init_db(settings.database_url)

    with get_session() as session:
        created = import_legacy_alerts(session, args.file)

    print(f"Import finished: {created} reminders created")


if __name__ == "__main__":
    main()
