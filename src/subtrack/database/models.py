"""SQLAlchemy models for subtrack database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


class Subscription(Base):
    """Recurring payment model."""

    __tablename__ = "subscriptions"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    category = Column(String, nullable=False)
    frequency = Column(String, nullable=False, default="monthly")
    day_of_month = Column(Integer, nullable=True)
    amount = Column(Numeric(12, 2), nullable=True)
    currency = Column(String, nullable=False, default="TRY")
    payment_method = Column(String, nullable=True)
    reminders = Column(JSON, nullable=False, default=lambda: [1])
    is_active = Column(Boolean, nullable=False, default=True)
    notes = Column(String, nullable=True)
    statement_day = Column(Integer, nullable=True)
    due_day = Column(Integer, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
