"""Exercise model with ordered links to muscle groups, equipment and tag lists.

Every list-valued attribute lives in its own link table with a `position`
column, so filtering is a relational EXISTS and order is preserved.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.core.enums import DifficultyType, ExerciseType, MovementType
from liftlog.db.base import Base, TimestampMixin, UtcDateTime


class Exercise(TimestampMixin, Base):
    """Exercise definition. Shared reference data; workouts point at it, never own it."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    type: Mapped[ExerciseType] = mapped_column(Enum(ExerciseType, name="exercise_type"), nullable=False)
    video_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    last_used_at: Mapped[datetime | None] = mapped_column(UtcDateTime, nullable=True)

    muscle_group_links: Mapped[list["ExerciseMuscleGroup"]] = relationship(
        "ExerciseMuscleGroup",
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="ExerciseMuscleGroup.position",
    )
    equipment_links: Mapped[list["ExerciseEquipment"]] = relationship(
        "ExerciseEquipment",
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="ExerciseEquipment.position",
    )
    difficulty_links: Mapped[list["ExerciseDifficulty"]] = relationship(
        "ExerciseDifficulty",
        cascade="all, delete-orphan",
        order_by="ExerciseDifficulty.position",
    )
    movement_links: Mapped[list["ExerciseMovement"]] = relationship(
        "ExerciseMovement",
        cascade="all, delete-orphan",
        order_by="ExerciseMovement.position",
    )
    images: Mapped[list["ExerciseImage"]] = relationship(
        "ExerciseImage",
        cascade="all, delete-orphan",
        order_by="ExerciseImage.position",
    )


class ExerciseMuscleGroup(Base):
    __tablename__ = "exercise_muscle_groups"

    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    muscle_group_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("muscle_groups.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="muscle_group_links")
    muscle_group: Mapped["MuscleGroup"] = relationship("MuscleGroup")


class ExerciseEquipment(Base):
    __tablename__ = "exercise_equipment"

    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    equipment_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("equipment.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="equipment_links")
    equipment: Mapped["Equipment"] = relationship("Equipment")


class ExerciseDifficulty(Base):
    __tablename__ = "exercise_difficulties"

    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    difficulty: Mapped[DifficultyType] = mapped_column(
        Enum(DifficultyType, name="difficulty_type"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class ExerciseMovement(Base):
    __tablename__ = "exercise_movements"

    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    movement: Mapped[MovementType] = mapped_column(
        Enum(MovementType, name="movement_type"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class ExerciseImage(Base):
    __tablename__ = "exercise_images"

    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
