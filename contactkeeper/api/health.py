"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from contactkeeper import __version__
from contactkeeper.core.config import settings
from contactkeeper.core.database import check_db_connected, get_db
from contactkeeper.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Report liveness and whether the database answers."""
    return HealthResponse(
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
