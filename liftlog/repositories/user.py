"""User and VerificationToken repositories (email sign-in storage)."""

from datetime import datetime
from typing import Any

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.exceptions import NotFoundError
from liftlog.core.security import verify_token
from liftlog.db.base import utcnow
from liftlog.models.user import User, VerificationToken
from liftlog.repositories.base import repository_operation, validate_id
from liftlog.schemas.user import UserCreate, UserRead, UserUpdate

ENTITY = "User"


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, user_id) -> User:
        user = await self.session.get(User, user_id)
        if user is None:
            raise NotFoundError.for_entity(ENTITY, "User", id=str(user_id))
        return user

    async def find_by_id(self, id: Any) -> UserRead:
        user_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "find_by_id", id=user_id):
            return UserRead.model_validate(await self._get(user_id))

    async def find_by_email(self, email: str) -> UserRead | None:
        async with repository_operation(ENTITY, "find_by_email"):
            result = await self.session.execute(select(User).where(User.email == email.lower()))
            user = result.scalar_one_or_none()
            return UserRead.model_validate(user) if user else None

    async def find_all(self, filters: None = None) -> list[UserRead]:
        async with repository_operation(ENTITY, "find_all"):
            result = await self.session.execute(select(User).order_by(User.email.asc()))
            return [UserRead.model_validate(u) for u in result.scalars().all()]

    async def create(self, data: UserCreate) -> UserRead:
        async with repository_operation(ENTITY, "create"):
            fields = data.model_dump()
            fields["email"] = fields["email"].lower()
            user = User(**fields)
            self.session.add(user)
            await self.session.flush()
            await self.session.refresh(user)
            return UserRead.model_validate(user)

    async def update(self, id: Any, data: UserUpdate) -> UserRead:
        user_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "update", id=user_id):
            user = await self._get(user_id)
            for key, value in data.model_dump(exclude_unset=True).items():
                setattr(user, key, value)
            await self.session.flush()
            await self.session.refresh(user)
            return UserRead.model_validate(user)

    async def delete(self, id: Any) -> None:
        user_id = validate_id(ENTITY, id)
        async with repository_operation(ENTITY, "delete", id=user_id):
            await self.session.delete(await self._get(user_id))
            await self.session.flush()


class VerificationTokenRepository:
    """One-shot sign-in tokens. Only passlib hashes are stored."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, identifier: str, token_hash: str, expires: datetime) -> None:
        async with repository_operation("VerificationToken", "create"):
            # a new link supersedes any outstanding one for the same address
            await self.session.execute(
                sql_delete(VerificationToken).where(VerificationToken.identifier == identifier)
            )
            self.session.add(VerificationToken(identifier=identifier, token_hash=token_hash, expires=expires))
            await self.session.flush()

    async def consume(self, identifier: str, token: str) -> bool:
        """Delete and accept the matching unexpired token; False when none matches."""
        async with repository_operation("VerificationToken", "consume"):
            result = await self.session.execute(
                select(VerificationToken).where(VerificationToken.identifier == identifier)
            )
            now = utcnow()
            for row in result.scalars().all():
                if row.expires < now:
                    await self.session.delete(row)
                    continue
                if verify_token(token, row.token_hash):
                    await self.session.delete(row)
                    await self.session.flush()
                    return True
            await self.session.flush()
            return False
