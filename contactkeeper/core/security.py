"""Password hashing, JWT issuance, and bearer-token authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from contactkeeper.core.config import settings
from contactkeeper.schemas.auth import Identity

NO_TOKEN_MESSAGE = "No token, authorization denied"
INVALID_TOKEN_MESSAGE = "Token is not valid"


class AuthenticationError(Exception):
    """Raised when a bearer token is missing or cannot be verified."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password with a fresh salt. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: int) -> str:
    """Create a signed token whose payload is {"user": {"id": user_id}} plus iat/exp."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "user": {"id": user_id},
        "iat": now,
        "exp": now + timedelta(seconds=settings.JWT_EXPIRE_SECONDS),
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a token; return its payload.
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )


def authenticate_token(token: str | None) -> Identity:
    """
    Resolve a raw bearer token to the caller's identity.

    Returns an Identity on success. Raises AuthenticationError when the token
    is absent, badly signed, expired, or does not carry a usable user id.
    No database access happens here.
    """
    if not token:
        raise AuthenticationError(NO_TOKEN_MESSAGE)
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e

    user = payload.get("user")
    user_id = user.get("id") if isinstance(user, dict) else None
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise AuthenticationError(INVALID_TOKEN_MESSAGE)
    return Identity(user_id=user_id)
