"""Contacts CRUD endpoints. Every route acts only on the caller's own contacts."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contactkeeper.api.dependencies import require_identity
from contactkeeper.core.database import get_db
from contactkeeper.schemas.auth import Identity
from contactkeeper.schemas.common import MessageResponse
from contactkeeper.schemas.contact import ContactCreate, ContactRead, ContactUpdate
from contactkeeper.services import contacts as contact_service
from contactkeeper.services.contacts import ContactAccessError, ContactNotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()

_ERROR_RESPONSES = {
    401: {"model": MessageResponse},
    404: {"model": MessageResponse},
    500: {"model": MessageResponse},
}


@contextmanager
def _service_errors(action: str, identity: Identity) -> Iterator[None]:
    """Map contact service errors to HTTP responses."""
    try:
        yield
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except ContactAccessError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception(
            "Contact %s failed", action, extra={"user_id": identity.user_id}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        ) from e


@router.get("", response_model=list[ContactRead], responses=_ERROR_RESPONSES)
def get_contacts(
    identity: Annotated[Identity, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> list[ContactRead]:
    """List the caller's contacts, newest first."""
    with _service_errors("list", identity):
        rows = contact_service.list_contacts(db, identity.user_id)
    return [ContactRead.model_validate(c) for c in rows]


@router.post("", response_model=ContactRead, responses=_ERROR_RESPONSES)
def add_contact(
    body: ContactCreate,
    identity: Annotated[Identity, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> ContactRead:
    with _service_errors("create", identity):
        contact = contact_service.create_contact(db, identity.user_id, body)
    return ContactRead.model_validate(contact)


@router.put("/{contact_id}", response_model=ContactRead, responses=_ERROR_RESPONSES)
def update_contact(
    contact_id: int,
    body: ContactUpdate,
    identity: Annotated[Identity, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> ContactRead:
    """Update the fields present in the body; others are left unchanged."""
    with _service_errors("update", identity):
        contact = contact_service.update_contact(db, identity.user_id, contact_id, body)
    return ContactRead.model_validate(contact)


@router.delete("/{contact_id}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def delete_contact(
    contact_id: int,
    identity: Annotated[Identity, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    with _service_errors("delete", identity):
        contact_service.delete_contact(db, identity.user_id, contact_id)
    return MessageResponse(msg="Contact removed")
