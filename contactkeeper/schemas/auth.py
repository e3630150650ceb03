"""Request/response schemas for registration and auth endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from contactkeeper.schemas.common import INVALID_EMAIL_MESSAGE, normalize_email

NAME_MAX_LEN = 30
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

NAME_MESSAGE = "Name is required to create an account"
PASSWORD_LENGTH_MESSAGE = "Please include a password with minimum 8 chars"
PASSWORD_REQUIRED_MESSAGE = "Password is required"


def _require_string(v: Any, message: str) -> str:
    """Absent (None default) or non-string input fails with the field's own message."""
    if not isinstance(v, str):
        raise ValueError(message)
    return v


class RegisterRequest(BaseModel):
    """New account details."""

    # Fields default to None so an absent field still reaches its validator.
    model_config = ConfigDict(json_schema_extra={"required": ["name", "email", "password"]})

    name: str = Field(default=None, validate_default=True, description="Display name (1-30 chars)")
    email: str = Field(
        default=None, validate_default=True, description="Login email, unique per account"
    )
    password: str = Field(default=None, validate_default=True, description="Password (8-128 chars)")

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def require_string(cls, v: Any, info: ValidationInfo) -> str:
        messages = {
            "name": NAME_MESSAGE,
            "email": INVALID_EMAIL_MESSAGE,
            "password": PASSWORD_LENGTH_MESSAGE,
        }
        return _require_string(v, messages[info.field_name])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v or len(v) > NAME_MAX_LEN:
            raise ValueError(NAME_MESSAGE)
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LEN:
            raise ValueError(PASSWORD_LENGTH_MESSAGE)
        if len(v) > PASSWORD_MAX_LEN:
            raise ValueError("Password must be at most 128 chars")
        return v


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(json_schema_extra={"required": ["email", "password"]})

    email: str = Field(default=None, validate_default=True)
    password: str = Field(default=None, validate_default=True)

    @field_validator("email", "password", mode="before")
    @classmethod
    def require_string(cls, v: Any, info: ValidationInfo) -> str:
        messages = {"email": INVALID_EMAIL_MESSAGE, "password": PASSWORD_REQUIRED_MESSAGE}
        return _require_string(v, messages[info.field_name])

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError(PASSWORD_REQUIRED_MESSAGE)
        return v


class TokenResponse(BaseModel):
    """Token issued after registration or login."""

    msg: str = Field(..., description="Outcome message")
    token: str = Field(..., description="JWT; send as Authorization: Bearer <token>")


class UserProfile(BaseModel):
    """Public view of a user. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    date: datetime | None = None


class Identity(BaseModel):
    """Caller identity resolved from a verified bearer token."""

    model_config = ConfigDict(frozen=True)

    user_id: int
