"""Muscle group schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from liftlog.core.enums import Body


class MuscleGroupBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    body: Body


class MuscleGroupCreate(MuscleGroupBase):
    pass


class MuscleGroupUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, min_length=1, max_length=1000)
    body: Body | None = None


class MuscleGroupPut(MuscleGroupUpdate):
    """PUT body: the target id travels with the fields."""

    id: str


class MuscleGroupRead(MuscleGroupBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class MuscleGroupRef(BaseModel):
    """Minimal muscle group info embedded in exercises."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    body: Body
