"""Muscle group model - reference data exercises link to."""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.core.enums import Body
from liftlog.db.base import Base, TimestampMixin


class MuscleGroup(TimestampMixin, Base):
    """A targeted muscle (e.g. Quadriceps) with its body region. Name is not unique."""

    __tablename__ = "muscle_groups"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    body: Mapped[Body] = mapped_column(Enum(Body, name="body_region"), nullable=False, index=True)
