"""Security utilities: sign-in token hashing and session JWTs."""

import secrets
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from liftlog.core.exceptions import AuthenticationError

token_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def generate_token() -> str:
    return secrets.token_urlsafe(32)


def hash_token(plain: str) -> str:
    return token_context.hash(plain)


def verify_token(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    return token_context.verify(plain, hashed)


def create_session_token(
    user_id: uuid.UUID,
    secret_key: str,
    algorithm: str,
    max_age: timedelta,
) -> str:
    expire = datetime.now(timezone.utc) + max_age
    return jwt.encode({"sub": str(user_id), "exp": expire}, secret_key, algorithm=algorithm)


def decode_session_token(token: str, secret_key: str, algorithm: str) -> uuid.UUID:
    """Return the user id carried by a session token."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError as exc:
        raise AuthenticationError("Invalid session token") from exc
    sub = payload.get("sub")
    if sub is None:
        raise AuthenticationError("Session token has no subject")
    try:
        return uuid.UUID(sub)
    except ValueError as exc:
        raise AuthenticationError("Session token subject is not a user id") from exc
