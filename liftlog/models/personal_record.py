"""PersonalRecord model - best values achieved per exercise."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Enum, Float, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.core.enums import RecordType
from liftlog.db.base import Base, TimestampMixin, UtcDateTime, utcnow


class PersonalRecord(TimestampMixin, Base):
    """A record achieved on a set. Rebuilt whenever the workout's exercise list is replaced."""

    __tablename__ = "personal_records"
    __table_args__ = (Index("ix_personal_records_exercise_type", "exercise_id", "type"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    workout_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("workout_sets.id", ondelete="SET NULL"), nullable=True
    )
    type: Mapped[RecordType] = mapped_column(Enum(RecordType, name="record_type"), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    achieved_at: Mapped[datetime] = mapped_column(UtcDateTime, default=utcnow, nullable=False)

    workout: Mapped["Workout"] = relationship("Workout", back_populates="personal_records")
