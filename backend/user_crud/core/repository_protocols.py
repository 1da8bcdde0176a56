"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the pure checks in
      validate_user.py never await
"""

from typing import Protocol

from user_crud.core.domain_types import UserId
from user_crud.schemas.user import UserSchema


class UserRepository(Protocol):
    """Contract for user persistence - implemented by infrastructure."""
    async def get(self, user_id: UserId) -> UserSchema | None: ...
    async def list_all(self) -> list[UserSchema]: ...
    async def email_in_use(
        self, email: str, exclude_id: UserId | None = None,
    ) -> bool: ...
    async def insert(self, user: UserSchema) -> None: ...
    async def update(self, user: UserSchema) -> bool: ...
    async def delete(self, user_id: UserId) -> bool: ...


class UserServiceLike(Protocol):
    """Capability the HTTP handler depends on (UserService or a test double)."""
    async def fetch_user_details_by_id(self, user_id: UserId) -> UserSchema: ...
    async def fetch_all_user_details(self) -> list[UserSchema]: ...
    async def email_validation(
        self, email: str, exclude_id: UserId | None = None,
    ) -> bool: ...
    async def insert_user_details(self, user: UserSchema) -> None: ...
    async def update_user_details(self, user: UserSchema) -> None: ...
    async def delete_user_details_by_id(self, user_id: UserId) -> None: ...
