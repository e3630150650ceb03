"""ORM model for registered users."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from contactkeeper.models.base import Base


class User(Base):
    """
    Account that owns contacts.

    email is unique at the database level; registration relies on the index,
    not only on a lookup before insert.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    contacts = relationship(
        "Contact",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
