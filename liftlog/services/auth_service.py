"""Email-link sign-in and session resolution.

Flow: request_sign_in mails a one-shot link carrying a random token (only its
hash is stored); complete_sign_in consumes the token, creates the user on
first sign-in and returns a signed session JWT whose subject is the user id.
"""

import logging
from datetime import timedelta
from urllib.parse import urlencode

from liftlog.core.config import Settings
from liftlog.core.exceptions import AuthenticationError, NotFoundError
from liftlog.core.security import create_session_token, decode_session_token, generate_token, hash_token
from liftlog.db.base import utcnow
from liftlog.repositories.user import UserRepository, VerificationTokenRepository
from liftlog.schemas.user import SessionToken, UserCreate, UserRead, UserUpdate
from liftlog.services.base import logged
from liftlog.services.mailer import Mailer


class AuthService:
    logger = logging.getLogger(__name__)

    def __init__(
        self,
        users: UserRepository,
        tokens: VerificationTokenRepository,
        mailer: Mailer,
        settings: Settings,
    ):
        self.users = users
        self.tokens = tokens
        self.mailer = mailer
        self.settings = settings

    def _callback_url(self, email: str, token: str) -> str:
        query = urlencode({"email": email, "token": token})
        return f"{self.settings.base_url}{self.settings.api_prefix}/auth/callback/email?{query}"

    @logged("request_sign_in")
    async def request_sign_in(self, email: str) -> None:
        identifier = email.lower()
        token = generate_token()
        expires = utcnow() + timedelta(minutes=self.settings.verification_token_max_age_minutes)
        await self.tokens.create(identifier, hash_token(token), expires)
        await self.mailer.send_sign_in_link(identifier, self._callback_url(identifier, token))

    @logged("complete_sign_in")
    async def complete_sign_in(self, email: str, token: str) -> SessionToken:
        identifier = email.lower()
        if not token or not await self.tokens.consume(identifier, token):
            raise AuthenticationError("Invalid or expired sign-in link")
        user = await self.users.find_by_email(identifier)
        if user is None:
            user = await self.users.create(UserCreate(email=identifier, email_verified=utcnow()))
        elif user.email_verified is None:
            user = await self.users.update(user.id, UserUpdate(email_verified=utcnow()))
        access_token = create_session_token(
            user.id,
            self.settings.secret_key,
            self.settings.algorithm,
            timedelta(days=self.settings.session_max_age_days),
        )
        return SessionToken(access_token=access_token)

    @logged("resolve_session")
    async def resolve_session(self, token: str) -> UserRead:
        user_id = decode_session_token(token, self.settings.secret_key, self.settings.algorithm)
        try:
            return await self.users.find_by_id(user_id)
        except NotFoundError as exc:
            raise AuthenticationError("Session user no longer exists") from exc
