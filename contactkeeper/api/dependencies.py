"""Request-scoped dependencies shared by protected routes."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from contactkeeper.core.security import AuthenticationError, authenticate_token
from contactkeeper.schemas.auth import Identity

security = HTTPBearer(auto_error=False)


def require_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Dependency: verify the Bearer token and return the caller's Identity. Raises 401 otherwise."""
    token = credentials.credentials if credentials is not None else None
    try:
        return authenticate_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
