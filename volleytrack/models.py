from datetime import datetime, timezone
import secrets

from sqlalchemy import Column, Integer, String, Text, DateTime, Date, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from volleytrack.database import Base


def new_id() -> str:
    """Opaque URL-safe identifier for categories, exercises and plans."""
    return secrets.token_urlsafe(12)


def utcnow() -> datetime:
    # SQLite drops tzinfo, so timestamps are stored as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class WorkoutCategory(Base):
    __tablename__ = "workout_categories"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    focus_area = Column(String(100), nullable=False)
    key_objective = Column(String(500), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    exercises = relationship(
        "Exercise",
        back_populates="category",
        order_by="Exercise.order",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(32), primary_key=True, default=new_id)
    category_id = Column(
        String(32), ForeignKey("workout_categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    sets = Column(Integer, nullable=False)
    repetitions = Column(String(50), nullable=False)
    difficulty = Column(String(20), nullable=False)  # easy, medium, challenging
    description = Column(Text, nullable=True)
    order = Column("position", Integer, nullable=False, default=0)

    category = relationship("WorkoutCategory", back_populates="exercises")


class WorkoutPlan(Base):
    """A user's plan. References its category by id only, no cascade."""
    __tablename__ = "workout_plans"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    category_id = Column(String(32), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    number_of_weeks = Column(Integer, nullable=False)
    selected_days = Column(JSON, nullable=False)  # weekday indices, 0 = Sunday
    selected_exercise_ids = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)


class Event(Base):
    """Analytics events for tracking usage."""
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(DateTime, server_default=func.now(), nullable=False, index=True)
    event_type = Column(String(50), nullable=False)  # 'funnel' or 'feature'
    name = Column(String(255), nullable=False, index=True)
    event_metadata = Column("metadata", Text, nullable=True)  # JSON string
