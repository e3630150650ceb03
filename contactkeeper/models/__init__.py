"""SQLAlchemy ORM models."""

from contactkeeper.models.base import Base
from contactkeeper.models.contact import Contact
from contactkeeper.models.user import User

__all__ = ["Base", "Contact", "User"]
