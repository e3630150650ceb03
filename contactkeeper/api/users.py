"""Registration endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from contactkeeper.core.database import get_db
from contactkeeper.core.security import create_access_token
from contactkeeper.schemas.auth import RegisterRequest, TokenResponse
from contactkeeper.schemas.common import MessageResponse, ValidationErrorResponse
from contactkeeper.services.users import UserAlreadyExistsError, register_user

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=TokenResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": MessageResponse},
    },
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Register a new user and return a token for it.

    Fails with 400 when a field is invalid or the email is taken.
    """
    try:
        user = register_user(db, body.name, body.email, body.password)
        token = create_access_token(user.id)
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Exception as e:
        # Database, hashing or signing failure: log it, keep the body opaque.
        logger.exception("Registration failed", extra={"reason": type(e).__name__})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something is wrong with the server",
        ) from e
    return TokenResponse(msg="user registered successfully", token=token)
