"""Contact CRUD scoped to the owning user."""

import logging

from sqlalchemy.orm import Session

from contactkeeper.models import Contact
from contactkeeper.schemas.contact import ContactCreate, ContactUpdate

logger = logging.getLogger(__name__)


class ContactNotFoundError(Exception):
    def __init__(self, contact_id: int) -> None:
        self.contact_id = contact_id
        self.message = "Contact not found"
        super().__init__(self.message)


class ContactAccessError(Exception):
    """Contact exists but belongs to another user."""

    def __init__(self, contact_id: int) -> None:
        self.contact_id = contact_id
        self.message = "Not authorized"
        super().__init__(self.message)


def list_contacts(db: Session, user_id: int) -> list[Contact]:
    """All contacts owned by user_id, newest first."""
    return (
        db.query(Contact)
        .filter(Contact.user_id == user_id)
        .order_by(Contact.date.desc(), Contact.id.desc())
        .all()
    )


def get_owned_contact(db: Session, user_id: int, contact_id: int) -> Contact:
    contact = db.query(Contact).filter(Contact.id == contact_id).first()
    if contact is None:
        raise ContactNotFoundError(contact_id)
    if contact.user_id != user_id:
        logger.warning(
            "Contact access denied",
            extra={"contact_id": contact_id, "user_id": user_id},
        )
        raise ContactAccessError(contact_id)
    return contact


def create_contact(db: Session, user_id: int, data: ContactCreate) -> Contact:
    contact = Contact(
        user_id=user_id,
        name=data.name,
        email=data.email,
        phone=data.phone,
        type=data.type,
    )
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def update_contact(
    db: Session, user_id: int, contact_id: int, data: ContactUpdate
) -> Contact:
    """Apply only the fields the client sent; omitted fields keep their values."""
    contact = get_owned_contact(db, user_id, contact_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if field in ("name", "type") and value is None:
            continue
        setattr(contact, field, value)
    db.commit()
    db.refresh(contact)
    return contact


def delete_contact(db: Session, user_id: int, contact_id: int) -> None:
    contact = get_owned_contact(db, user_id, contact_id)
    db.delete(contact)
    db.commit()
    logger.info("Contact removed", extra={"contact_id": contact_id, "user_id": user_id})
