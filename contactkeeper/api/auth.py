"""Login and current-user endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contactkeeper.api.dependencies import require_identity
from contactkeeper.core.database import get_db
from contactkeeper.core.security import create_access_token
from contactkeeper.schemas.auth import Identity, LoginRequest, TokenResponse, UserProfile
from contactkeeper.schemas.common import MessageResponse, ValidationErrorResponse
from contactkeeper.services.users import InvalidCredentialsError, authenticate_user, get_user

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=UserProfile,
    responses={401: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def get_me(
    identity: Annotated[Identity, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> UserProfile:
    """Return the logged-in user's profile (no password)."""
    try:
        user = get_user(db, identity.user_id)
    except SQLAlchemyError as e:
        logger.exception("Profile lookup failed", extra={"user_id": identity.user_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        ) from e
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserProfile.model_validate(user)


@router.post(
    "",
    response_model=TokenResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a token.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        user = authenticate_user(db, body.email, body.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception("Login failed", extra={"reason": type(e).__name__})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        ) from e
    return TokenResponse(msg="user logged in successfully", token=create_access_token(user.id))
