"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from liftlog.core.enums import DifficultyType, ExerciseType, MovementType
from liftlog.schemas.common import UrlStr, unique_in_order
from liftlog.schemas.equipment import EquipmentRef
from liftlog.schemas.muscle_group import MuscleGroupRef


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    type: ExerciseType
    muscle_groups: list[UUID] = Field(..., min_length=1, description="Muscle group ids, in order")
    difficulty: list[DifficultyType] = Field(..., min_length=1)
    equipment: list[UUID] = Field(default_factory=list, description="Equipment ids, in order")
    movements: list[MovementType] = Field(default_factory=list)
    video_url: UrlStr | None = None
    image_urls: list[UrlStr] = Field(default_factory=list)
    is_archived: bool = False

    @field_validator("muscle_groups", "difficulty", "equipment", "movements", "image_urls")
    @classmethod
    def _dedupe(cls, v):
        return unique_in_order(v)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    """Partial update. Lists, when sent, replace the stored list entirely."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    type: ExerciseType | None = None
    muscle_groups: list[UUID] | None = Field(None, min_length=1)
    difficulty: list[DifficultyType] | None = Field(None, min_length=1)
    equipment: list[UUID] | None = None
    movements: list[MovementType] | None = None
    video_url: UrlStr | None = None
    image_urls: list[UrlStr] | None = None
    is_archived: bool | None = None
    last_used_at: datetime | None = None

    @field_validator("muscle_groups", "difficulty", "equipment", "movements", "image_urls")
    @classmethod
    def _dedupe(cls, v):
        return unique_in_order(v)


class ExerciseRead(BaseModel):
    id: UUID
    name: str
    description: str = ""
    type: ExerciseType
    muscle_groups: list[MuscleGroupRef] = []
    difficulty: list[DifficultyType] = []
    equipment: list[EquipmentRef] = []
    movements: list[MovementType] = []
    video_url: str | None = None
    image_urls: list[str] = []
    is_archived: bool = False
    last_used_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in workout responses (id + name only)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
