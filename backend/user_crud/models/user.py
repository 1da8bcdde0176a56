"""User ORM - persists user records.

Invariants:
    - id is a caller-assigned 64-bit integer primary key (never generated)
    - email is unique at the database level; UserService checks it before writes
    - All columns non-nullable; empty string / 0 stand in for absent values

Design Decisions:
    - The service check answers the common case with the duplicate-email text;
      the unique index catches concurrent writers, whose loser surfaces as a
      storage failure
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from user_crud.db.base import Base


class User(Base):
    """User record."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    email: Mapped[str] = mapped_column(
        String(254), nullable=False, default="", unique=True, index=True,
    )
    phone: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    age: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
