"""Shared response bodies and field validation helpers."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field

INVALID_EMAIL_MESSAGE = "Please include a valid email"


def normalize_email(value: str) -> str:
    """Return a trimmed, lower-cased email or raise ValueError if it is malformed."""
    try:
        result = validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(INVALID_EMAIL_MESSAGE) from e
    return result.normalized.lower()


class MessageResponse(BaseModel):
    """Plain message body used for errors and simple acknowledgements."""

    msg: str


class FieldError(BaseModel):
    """One failing input field."""

    msg: str = Field(..., description="Human-readable reason")
    param: str = Field(..., description="Field name, dotted for nested fields")
    location: str = Field(default="body", description="Where the field was read from")


class ValidationErrorResponse(BaseModel):
    """400 body for request validation failures."""

    errors: list[FieldError]
