"""Declarative Base shared by all ORM models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Index names match op.f("ix_...") in alembic/versions. Primary and foreign keys
# are left to the database's default naming, as the migration creates them unnamed.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
