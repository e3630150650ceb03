"""Schemas for the contacts API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contactkeeper.schemas.common import normalize_email

ContactType = Literal["personal", "professional"]


def _optional_email(v: str | None) -> str | None:
    if v is None or not v.strip():
        return None
    return normalize_email(v)


class ContactCreate(BaseModel):
    """Body for adding a contact."""

    name: str = Field(..., description="Contact name")
    email: str | None = None
    phone: str | None = Field(default=None, max_length=64)
    type: ContactType = "personal"

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        if len(v) > 255:
            raise ValueError("Name must be at most 255 chars")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return _optional_email(v)


class ContactUpdate(BaseModel):
    """Partial update; only fields present in the body are changed."""

    name: str | None = None
    email: str | None = None
    phone: str | None = Field(default=None, max_length=64)
    type: ContactType | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        if len(v) > 255:
            raise ValueError("Name must be at most 255 chars")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return _optional_email(v)


class ContactRead(BaseModel):
    """Contact as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    type: ContactType
    date: datetime | None = None
