"""
LazyFestival reminder service

Runs the periodic reminder scan for the festival lineup bot.
"""

import argparse
import logging

from apscheduler.schedulers.blocking import BlockingScheduler
from dotenv import load_dotenv

from .config import settings
from .database import init_db
from .delivery import ConsoleSender, MessageSender, TelegramSender
from .reminders import ReminderScanner

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Log to stderr and logs/lazyfestival.log"""
    log_dir = settings.BASE_DIR / "logs"
    log_dir.mkdir(exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_dir / "lazyfestival.log", encoding="utf-8"),
        ],
    )


def build_sender(dry_run: bool) -> MessageSender:
    if dry_run:
        logger.info("Dry run: reminders are logged, not sent")
        return ConsoleSender()
    return TelegramSender()


def run_scheduler(scanner: ReminderScanner) -> None:
    """Run the scan until interrupted"""
    logger.info("LazyFestival reminder scheduler starting")

    scheduler = BlockingScheduler()
    scanner.schedule(scheduler)

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")
        scheduler.shutdown(wait=False)


def main():
    parser = argparse.ArgumentParser(description="LazyFestival - festival reminder scheduler")
    parser.add_argument(
        "--run-once",
        action="store_true",
        help="run a single reminder scan and exit"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="log reminders instead of sending them to Telegram"
    )

    args = parser.parse_args()

    load_dotenv()
    setup_logging()

    logger.info("Initialising database...")
    init_db(settings.database_url)

    sender = build_sender(args.dry_run)
    scanner = ReminderScanner(sender)

    try:
        if args.run_once:
            result = scanner.tick()
            logger.info(f"Single scan finished: {result.sent} sent, {result.failed} failed")
        else:
            run_scheduler(scanner)
    finally:
        sender.close()


if __name__ == "__main__":
    main()
