"""
SQLAlchemy database models
"""

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base

from ..lead_times import LeadTime

Base = declarative_base()


def to_storage_time(value: datetime) -> datetime:
    """Normalise a timestamp to naive UTC with millisecond precision.

    Naive input is taken as UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


class Subscription(Base):
    """A subscriber's reminder for one lead time before one performance"""
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)

    band = Column(String(255), nullable=False)      # performance name
    time = Column(DateTime, nullable=False)         # performance start, naive UTC
    min = Column(Integer, nullable=False)           # lead minutes
    telegramid = Column(BigInteger, nullable=False)  # subscriber

    __table_args__ = (
        UniqueConstraint("telegramid", "band", "min", name="uq_alert_subscriber_band_min"),
        Index("idx_alert_time", "time"),
    )

    @property
    def lead_time(self) -> LeadTime:
        return LeadTime(self.min)

    @property
    def due_at(self) -> datetime:
        """Performance start as an aware UTC datetime"""
        return self.time.replace(tzinfo=timezone.utc)

    @property
    def remind_at(self) -> datetime:
        """Moment from which the reminder is ready to be sent"""
        return self.due_at - self.lead_time.delta

    def __repr__(self):
        return (
            f"<Subscription(telegramid={self.telegramid}, band='{self.band}', "
            f"min={self.min}, time='{self.time}')>"
        )
