"""Personal records of the signed-in user."""

import uuid

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_current_user, get_personal_record_service
from liftlog.core.enums import RecordType
from liftlog.schemas.common import SuccessResponse
from liftlog.schemas.personal_record import PersonalRecordRead
from liftlog.schemas.user import UserRead
from liftlog.services.personal_record_service import PersonalRecordService

router = APIRouter()


@router.get("", response_model=list[PersonalRecordRead])
async def list_personal_records(
    exercise_id: uuid.UUID | None = None,
    workout_id: uuid.UUID | None = None,
    type: RecordType | None = None,
    user: UserRead = Depends(get_current_user),
    service: PersonalRecordService = Depends(get_personal_record_service),
):
    """Most recent first."""
    return await service.list_personal_records(user.id, exercise_id=exercise_id, workout_id=workout_id, type=type)


@router.get("/{record_id}", response_model=PersonalRecordRead)
async def get_personal_record(
    record_id: str,
    user: UserRead = Depends(get_current_user),
    service: PersonalRecordService = Depends(get_personal_record_service),
):
    return await service.get_personal_record(record_id, user.id)


@router.delete("/{record_id}", response_model=SuccessResponse)
async def delete_personal_record(
    record_id: str,
    user: UserRead = Depends(get_current_user),
    service: PersonalRecordService = Depends(get_personal_record_service),
):
    await service.delete_personal_record(record_id, user.id)
    return SuccessResponse()
