"""User and sign-in verification token models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.db.base import Base, TimestampMixin, UtcDateTime


class User(TimestampMixin, Base):
    """An account created by email-link sign-in. Owns workouts."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True, unique=True, index=True)
    email_verified: Mapped[datetime | None] = mapped_column(UtcDateTime, nullable=True)
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    workouts: Mapped[list["Workout"]] = relationship(
        "Workout", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )


class VerificationToken(Base):
    """One-shot sign-in token. Only the hash is stored."""

    __tablename__ = "verification_tokens"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    identifier: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    token_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    expires: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False)
