"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Index and unique-constraint names follow NAMING_CONVENTION, so ORM metadata
      and the Alembic migrations agree on names (ix_users_email)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
}


class Base(DeclarativeBase):
    """Base class for the user CRUD ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
