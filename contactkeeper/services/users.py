"""User registration, lookup, and credential checks."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contactkeeper.core.security import hash_password, verify_password
from contactkeeper.models import User

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base error for user operations the caller can act on."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UserAlreadyExistsError(UserServiceError):
    """Email is already registered."""

    def __init__(self) -> None:
        super().__init__("User already exists!")


class InvalidCredentialsError(UserServiceError):
    """Unknown email or wrong password; deliberately does not say which."""

    def __init__(self) -> None:
        super().__init__("Invalid Credentials")


def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.lower()).first()


def register_user(db: Session, name: str, email: str, password: str) -> User:
    """
    Create a user with a salted password hash.

    The lookup before insert only short-circuits the common case. Two concurrent
    registrations for one email can both pass it; the unique index on
    users.email then rejects the second commit, which is reported the same way.
    """
    if get_user_by_email(db, email) is not None:
        raise UserAlreadyExistsError()

    user = User(name=name, email=email.lower(), password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration lost uniqueness race", extra={"reason": "integrity_error"})
        raise UserAlreadyExistsError() from e
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user for valid credentials; raise InvalidCredentialsError otherwise."""
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user
