"""Personal record schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.enums import RecordType
from liftlog.schemas.common import UtcDatetime


class PersonalRecordCreate(BaseModel):
    exercise_id: UUID
    workout_id: UUID
    set_id: UUID | None = None
    type: RecordType
    value: float = Field(..., ge=0)
    achieved_at: UtcDatetime | None = None


class PersonalRecordUpdate(BaseModel):
    type: RecordType | None = None
    value: float | None = Field(None, ge=0)
    achieved_at: UtcDatetime | None = None


class PersonalRecordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_id: UUID
    workout_id: UUID
    set_id: UUID | None = None
    type: RecordType
    value: float
    achieved_at: datetime
    created_at: datetime
    updated_at: datetime
