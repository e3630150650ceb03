"""Pydantic request/response schemas."""

from contactkeeper.schemas.auth import (
    Identity,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserProfile,
)
from contactkeeper.schemas.common import FieldError, MessageResponse, ValidationErrorResponse
from contactkeeper.schemas.contact import ContactCreate, ContactRead, ContactType, ContactUpdate
from contactkeeper.schemas.health import HealthResponse

__all__ = [
    "ContactCreate",
    "ContactRead",
    "ContactType",
    "ContactUpdate",
    "FieldError",
    "HealthResponse",
    "Identity",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "TokenResponse",
    "UserProfile",
    "ValidationErrorResponse",
]
