"""User Service - business rules for user records, no HTTP knowledge.

Invariants:
    - Writes (insert/update/delete) never reach the repository with id 0
    - email_validation returns False for malformed or already-used emails; it
      raises only when the repository fails
    - Missing records raise UserNotFoundError (get, update, delete)
    - Storage failures propagate as StorageFailureError from the repository

Design Decisions:
    - Repository injected at construction (core Protocol): tests pass fakes
    - email_validation takes exclude_id so an update may keep the user's own email
    - insert/update do not re-run email_validation: the handler calls it first
      and reports a negative result with its own message
"""

import logging

from user_crud.core.domain_types import UserId
from user_crud.core.errors import UserNotFoundError
from user_crud.core.repository_protocols import UserRepository
from user_crud.core.validate_user import check_id_nonzero, is_well_formed_email
from user_crud.schemas.user import UserSchema

logger = logging.getLogger(__name__)


class UserService:
    """Validates and orchestrates user operations over a UserRepository."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def fetch_user_details_by_id(self, user_id: UserId) -> UserSchema:
        user = await self.repository.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def fetch_all_user_details(self) -> list[UserSchema]:
        """All stored users ordered by id; empty list when none."""
        return await self.repository.list_all()

    async def email_validation(
        self, email: str, exclude_id: UserId | None = None,
    ) -> bool:
        """True when email is well-formed and unused by any other user."""
        if not is_well_formed_email(email):
            logger.info("Rejected malformed email")
            return False
        in_use = await self.repository.email_in_use(email, exclude_id)
        return not in_use

    async def insert_user_details(self, user: UserSchema) -> None:
        check_id_nonzero(user.id)
        await self.repository.insert(user)

    async def update_user_details(self, user: UserSchema) -> None:
        """Whole-record replace of an existing user."""
        check_id_nonzero(user.id)
        if not await self.repository.update(user):
            raise UserNotFoundError(user.id)

    async def delete_user_details_by_id(self, user_id: UserId) -> None:
        check_id_nonzero(user_id)
        if not await self.repository.delete(user_id):
            raise UserNotFoundError(user_id)
