"""User and sign-in schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str | None = None
    email: str | None = None
    email_verified: datetime | None = None
    image: str | None = None
    created_at: datetime
    updated_at: datetime


class UserCreate(BaseModel):
    email: EmailStr
    name: str | None = None
    image: str | None = None
    email_verified: datetime | None = None


class UserUpdate(BaseModel):
    name: str | None = None
    image: str | None = None
    email_verified: datetime | None = None


class EmailSignInRequest(BaseModel):
    email: EmailStr


class SessionToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
