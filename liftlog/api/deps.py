"""FastAPI dependencies: per-request repositories, services and the signed-in user."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.config import Settings
from liftlog.core.exceptions import AuthenticationError
from liftlog.db.session import get_db
from liftlog.repositories import (
    EquipmentRepository,
    ExerciseRepository,
    MuscleGroupRepository,
    PersonalRecordRepository,
    UserRepository,
    VerificationTokenRepository,
    WorkoutRepository,
)
from liftlog.schemas.user import UserRead
from liftlog.services.auth_service import AuthService
from liftlog.services.equipment_service import EquipmentService
from liftlog.services.exercise_service import ExerciseService
from liftlog.services.mailer import Mailer, SmtpMailer
from liftlog.services.muscle_group_service import MuscleGroupService
from liftlog.services.personal_record_service import PersonalRecordService
from liftlog.services.workout_service import WorkoutService

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mailer(settings: Settings = Depends(get_app_settings)) -> Mailer:
    return SmtpMailer(settings)


def get_exercise_service(db: AsyncSession = Depends(get_db)) -> ExerciseService:
    return ExerciseService(ExerciseRepository(db))


def get_muscle_group_service(db: AsyncSession = Depends(get_db)) -> MuscleGroupService:
    return MuscleGroupService(MuscleGroupRepository(db))


def get_equipment_service(db: AsyncSession = Depends(get_db)) -> EquipmentService:
    return EquipmentService(EquipmentRepository(db))


def get_personal_record_service(db: AsyncSession = Depends(get_db)) -> PersonalRecordService:
    return PersonalRecordService(PersonalRecordRepository(db), WorkoutRepository(db))


def get_workout_service(
    db: AsyncSession = Depends(get_db),
    personal_records: PersonalRecordService = Depends(get_personal_record_service),
) -> WorkoutService:
    return WorkoutService(WorkoutRepository(db), personal_records)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(UserRepository(db), VerificationTokenRepository(db), mailer, settings)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> UserRead:
    """User identified by the `Authorization: Bearer <session token>` header."""
    if credentials is None:
        raise AuthenticationError("Not signed in")
    return await auth.resolve_session(credentials.credentials)
