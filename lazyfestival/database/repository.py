"""
Subscription store: engine setup, sessions and the repository
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from contextlib import contextmanager

from sqlalchemy import and_, create_engine, event, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..exceptions import PersistenceError
from ..lead_times import LeadTime
from .models import Base, Subscription, to_storage_time

logger = logging.getLogger(__name__)


# Engine and session factory
_engine = None
_SessionLocal = None


def _enable_sqlite_transactions(engine) -> None:
    """Let SQLAlchemy control BEGIN so savepoints behave under pysqlite.

    BEGIN IMMEDIATE takes the write lock up front; concurrent sessions wait on
    the busy timeout instead of failing on a lock upgrade.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def init_db(database_url: str = "sqlite:///./data/lazyfestival.db") -> None:
    """Initialise the database and create missing tables"""
    global _engine, _SessionLocal

    # Create the data directory for file based SQLite
    if database_url.startswith("sqlite:///") and database_url != "sqlite:///:memory:":
        db_path = database_url.replace("sqlite:///", "")
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    try:
        _engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False, "timeout": 15} if "sqlite" in database_url else {}
        )
        if _engine.dialect.name == "sqlite":
            _enable_sqlite_transactions(_engine)
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=_engine,
        )
        Base.metadata.create_all(bind=_engine)
    except SQLAlchemyError as e:
        raise PersistenceError(f"Could not initialise database: {e}") from e

    logger.info(f"Database ready: {_engine.url.render_as_string(hide_password=True)}")


@contextmanager
def get_session():
    """Session context manager; one session is one transaction"""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise PersistenceError(str(e)) from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubscriptionRepository:
    """Reminder subscription store"""

    @staticmethod
    def get(
        session: Session,
        subscriber: int,
        performance: str,
        lead_minutes: int
    ) -> Optional[Subscription]:
        """Look up a subscription by its natural key"""
        return (
            session.query(Subscription)
            .filter(
                and_(
                    Subscription.telegramid == subscriber,
                    Subscription.band == performance,
                    Subscription.min == int(lead_minutes),
                )
            )
            .first()
        )

    @staticmethod
    def create(
        session: Session,
        subscriber: int,
        performance: str,
        lead_minutes: int,
        due_at: datetime
    ) -> Subscription:
        """
        Create a subscription, or return the existing one for the same key

        Args:
            subscriber: telegram chat id
            performance: band name
            lead_minutes: one of the LeadTime values
            due_at: performance start

        Returns:
            the stored Subscription
        """
        lead = LeadTime(lead_minutes)

        existing = SubscriptionRepository.get(session, subscriber, performance, lead)
        if existing:
            return existing

        subscription = Subscription(
            band=performance,
            time=to_storage_time(due_at),
            min=int(lead),
            telegramid=subscriber,
        )
        try:
            # Savepoint: a duplicate only undoes this insert, not the caller's transaction
            with session.begin_nested():
                session.add(subscription)
        except IntegrityError:
            # A concurrent caller inserted the same key first
            logger.debug(f"Subscription already exists: {subscriber} / {performance} / {lead.label}")
            return SubscriptionRepository.get(session, subscriber, performance, lead)
        return subscription

    @staticmethod
    def delete(
        session: Session,
        subscriber: int,
        performance: str,
        lead_minutes: int
    ) -> int:
        """Delete a subscription; returns the number of removed rows"""
        return (
            session.query(Subscription)
            .filter(
                and_(
                    Subscription.telegramid == subscriber,
                    Subscription.band == performance,
                    Subscription.min == int(lead_minutes),
                )
            )
            .delete(synchronize_session=False)
        )

    @staticmethod
    def find_by_subscriber_and_performance(
        session: Session,
        subscriber: int,
        performance: str
    ) -> list[Subscription]:
        """All lead-time subscriptions a subscriber holds for a performance"""
        return (
            session.query(Subscription)
            .filter(
                and_(
                    Subscription.telegramid == subscriber,
                    Subscription.band == performance,
                )
            )
            .order_by(Subscription.min)
            .all()
        )

    @staticmethod
    def find_ready(session: Session, now: datetime = None) -> list[Subscription]:
        """
        Subscriptions whose reminder is due, i.e. now >= time - min

        Args:
            now: reference time; defaults to the current wall clock

        Returns:
            ready subscriptions, earliest performance first
        """
        threshold = to_storage_time(now or _utc_now())

        # One clause per lead time keeps the comparison portable across dialects
        conditions = [
            and_(
                Subscription.min == int(lead),
                Subscription.time <= threshold + lead.delta,
            )
            for lead in LeadTime
        ]
        return (
            session.query(Subscription)
            .filter(or_(*conditions))
            .order_by(Subscription.time, Subscription.id)
            .all()
        )

    @staticmethod
    def get_all(session: Session) -> list[Subscription]:
        return session.query(Subscription).order_by(Subscription.time, Subscription.id).all()

    @staticmethod
    def count(
        session: Session,
        subscriber: int = None,
        performance: str = None
    ) -> int:
        query = session.query(Subscription)
        if subscriber is not None:
            query = query.filter(Subscription.telegramid == subscriber)
        if performance is not None:
            query = query.filter(Subscription.band == performance)
        return query.count()
