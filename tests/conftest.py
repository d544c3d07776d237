"""
Shared fixtures for the LiftLog test suite.

Strategy:
- Every test gets a fresh application built by create_application() on an
  in-memory SQLite database (aiosqlite, one shared connection); the schema is
  created from the ORM metadata.
- Outgoing mail goes to FakeMailer through dependency_overrides.
- Workout endpoints get the signed-in user through an override of
  get_current_user; the auth tests exercise real session tokens.
"""

import os

# The module-level app in liftlog.main reads settings at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("EMAIL_SERVER_HOST", "smtp.test")
os.environ.setdefault("EMAIL_SERVER_PORT", "587")
os.environ.setdefault("EMAIL_SERVER_USER", "mailer")
os.environ.setdefault("EMAIL_SERVER_PASSWORD", "secret")
os.environ.setdefault("EMAIL_FROM", "LiftLog <noreply@liftlog.test>")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from liftlog.api.deps import get_current_user, get_mailer  # noqa: E402
from liftlog.core.config import Settings  # noqa: E402
from liftlog.core.enums import Body, DifficultyType, ExerciseType, MovementType  # noqa: E402
from liftlog.db.base import Base  # noqa: E402
from liftlog.main import create_application  # noqa: E402
from liftlog.repositories import ExerciseRepository, MuscleGroupRepository, UserRepository  # noqa: E402
from liftlog.schemas.exercise import ExerciseCreate  # noqa: E402
from liftlog.schemas.muscle_group import MuscleGroupCreate  # noqa: E402
from liftlog.schemas.user import UserCreate  # noqa: E402


class FakeMailer:
    """Collects sign-in links instead of sending them."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    async def send_sign_in_link(self, to: str, url: str) -> None:
        self.sent.append((to, url))


# ---------------------------------------------------------------------------
# Application and database
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        secret_key="test-secret",
        base_url="http://test",
        email_server_host="smtp.test",
        email_server_port=587,
        email_server_user="mailer",
        email_server_password="secret",
        email_from="LiftLog <noreply@liftlog.test>",
    )


@pytest.fixture
async def app(settings):
    app = create_application(settings)
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def session(app):
    """Session on the test database, for repository and service tests."""
    async with app.state.session_maker() as session:
        yield session


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------

@pytest.fixture
async def user(app):
    async with app.state.session_maker() as session:
        created = await UserRepository(session).create(UserCreate(email="lifter@example.com", name="Lifter"))
        await session.commit()
    return created


@pytest.fixture
async def other_user(app):
    async with app.state.session_maker() as session:
        created = await UserRepository(session).create(UserCreate(email="other@example.com"))
        await session.commit()
    return created


@pytest.fixture
async def quadriceps(app):
    async with app.state.session_maker() as session:
        created = await MuscleGroupRepository(session).create(
            MuscleGroupCreate(name="Quadriceps", description="Front thigh", body=Body.LOWER)
        )
        await session.commit()
    return created


@pytest.fixture
async def pectorals(app):
    async with app.state.session_maker() as session:
        created = await MuscleGroupRepository(session).create(
            MuscleGroupCreate(name="Pectoralis Major", description="Chest", body=Body.UPPER)
        )
        await session.commit()
    return created


@pytest.fixture
async def squat(app, quadriceps):
    async with app.state.session_maker() as session:
        created = await ExerciseRepository(session).create(
            ExerciseCreate(
                name="Back Squat",
                type=ExerciseType.STRENGTH,
                muscle_groups=[quadriceps.id],
                difficulty=[DifficultyType.INTERMEDIATE],
                movements=[MovementType.SQUAT],
            )
        )
        await session.commit()
    return created


# ---------------------------------------------------------------------------
# HTTP clients
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(app, mailer) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous client; mail goes to the fake mailer."""
    app.dependency_overrides[get_mailer] = lambda: mailer
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def user_client(app, mailer, user) -> AsyncGenerator[AsyncClient, None]:
    """Client signed in as `user` (get_current_user overridden)."""
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_current_user] = lambda: user
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

