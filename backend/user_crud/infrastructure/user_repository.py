"""SQL User Repository - SQLAlchemy implementation of core UserRepository.

Invariants:
    - Every write commits before returning; failed writes roll back
    - SQLAlchemyError never escapes: mapped to StorageFailureError with the raw
      driver message and the failing operation name
    - list_all returns users ordered by id
    - update/delete return False when no row has the id (caller decides the error)

Design Decisions:
    - ORM rows converted to UserSchema here: services and routes never see ORM objects
    - Duplicate primary key or email surfaces as a storage failure, matching the
      behaviour of the driver-level error the client would otherwise see
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_crud.core.domain_types import UserId
from user_crud.core.errors import StorageFailureError
from user_crud.infrastructure.database import describe_db_error
from user_crud.models.user import User
from user_crud.schemas.user import UserSchema

logger = logging.getLogger(__name__)


def _to_schema(row: User) -> UserSchema:
    return UserSchema(
        id=row.id, name=row.name, email=row.email, phone=row.phone, age=row.age,
    )


class SqlUserRepository:
    """User persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UserId) -> UserSchema | None:
        try:
            row = await self.db.get(User, user_id)
        except SQLAlchemyError as e:
            raise await self._storage_failure(e, "get")
        return _to_schema(row) if row else None

    async def list_all(self) -> list[UserSchema]:
        try:
            result = await self.db.execute(select(User).order_by(User.id))
        except SQLAlchemyError as e:
            raise await self._storage_failure(e, "list")
        return [_to_schema(row) for row in result.scalars().all()]

    async def email_in_use(
        self, email: str, exclude_id: UserId | None = None,
    ) -> bool:
        query = select(User.id).where(User.email == email)
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        try:
            result = await self.db.execute(query.limit(1))
        except SQLAlchemyError as e:
            raise await self._storage_failure(e, "email_lookup")
        return result.scalar_one_or_none() is not None

    async def insert(self, user: UserSchema) -> None:
        self.db.add(User(
            id=user.id, name=user.name, email=user.email,
            phone=user.phone, age=user.age,
        ))
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._storage_failure(e, "insert")
        logger.info("User inserted", extra={"user_id": user.id})

    async def update(self, user: UserSchema) -> bool:
        try:
            row = await self.db.get(User, user.id)
            if row is None:
                return False
            row.name = user.name
            row.email = user.email
            row.phone = user.phone
            row.age = user.age
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._storage_failure(e, "update")
        logger.info("User updated", extra={"user_id": user.id})
        return True

    async def delete(self, user_id: UserId) -> bool:
        try:
            result = await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._storage_failure(e, "delete")
        return result.rowcount > 0

    async def _storage_failure(
        self, exc: SQLAlchemyError, operation: str,
    ) -> StorageFailureError:
        await self.db.rollback()
        logger.error(
            f"Storage failure during {operation}: {exc}",
            extra={"operation": operation},
        )
        return StorageFailureError(describe_db_error(exc), operation)
