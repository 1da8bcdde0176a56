"""User Service - business rules against a real (SQLite) repository.

Tests cover:
    - fetch by id returns stored user, raises UserNotFoundError when absent
    - fetch all returns users ordered by id, empty list when none
    - email_validation: format + uniqueness, exclude_id for updates
    - insert/update/delete persist, guard id 0, report missing ids
    - duplicate primary key surfaces as StorageFailureError
"""

import pytest
from unittest.mock import AsyncMock

from user_crud.core.errors import (
    ErrorKind, StorageFailureError, UserNotFoundError, ZeroIdError,
)
from user_crud.schemas.user import UserSchema
from user_crud.services.user_service import UserService


def _user(user_id: int = 1, email: str = "new@gmail.com", **fields) -> UserSchema:
    return UserSchema(
        id=user_id,
        name=fields.get("name", "new"),
        email=email,
        phone=fields.get("phone", "1112223334"),
        age=fields.get("age", 40),
    )


# ─── Reads ───────────────────────────────────────────────────────

async def test_fetch_user_details_by_id_returns_stored_user(user_service, seed_users):
    user = await user_service.fetch_user_details_by_id(2)
    assert user == UserSchema(
        id=2, name="gopi", email="gopi@gmail.com", phone="1234567899", age=23,
    )


async def test_fetch_user_details_by_id_missing_raises_not_found(user_service, seed_users):
    with pytest.raises(UserNotFoundError) as exc:
        await user_service.fetch_user_details_by_id(99)
    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert exc.value.context.user_id == 99


async def test_fetch_all_user_details_ordered_by_id(user_service, seed_users):
    users = await user_service.fetch_all_user_details()
    assert [u.id for u in users] == [2, 3]


async def test_fetch_all_user_details_empty(user_service):
    assert await user_service.fetch_all_user_details() == []


# ─── email_validation ────────────────────────────────────────────

async def test_email_validation_unused_email_is_valid(user_service, seed_users):
    assert await user_service.email_validation("new@gmail.com") is True


async def test_email_validation_used_email_is_invalid(user_service, seed_users):
    assert await user_service.email_validation("gopi@gmail.com") is False


async def test_email_validation_malformed_email_is_invalid(user_service, seed_users):
    assert await user_service.email_validation("gopi-at-gmail") is False


async def test_email_validation_exclude_id_allows_own_email(user_service, seed_users):
    assert await user_service.email_validation("gopi@gmail.com", exclude_id=2) is True
    assert await user_service.email_validation("gopi@gmail.com", exclude_id=3) is False


async def test_email_validation_malformed_skips_repository():
    repository = AsyncMock()
    service = UserService(repository)
    assert await service.email_validation("not-an-email") is False
    repository.email_in_use.assert_not_awaited()


async def test_email_validation_propagates_storage_failure():
    repository = AsyncMock()
    repository.email_in_use.side_effect = StorageFailureError("db down", "email_lookup")
    service = UserService(repository)
    with pytest.raises(StorageFailureError):
        await service.email_validation("gopi@gmail.com")


# ─── Writes ──────────────────────────────────────────────────────

async def test_insert_user_details_persists(user_service, seed_users):
    await user_service.insert_user_details(_user(1))
    assert (await user_service.fetch_user_details_by_id(1)).email == "new@gmail.com"


async def test_insert_duplicate_id_is_storage_failure(user_service, seed_users):
    with pytest.raises(StorageFailureError) as exc:
        await user_service.insert_user_details(_user(2))
    assert exc.value.kind is ErrorKind.STORAGE_FAILURE
    assert exc.value.operation == "insert"
    assert "UNIQUE" in exc.value.message


async def test_insert_zero_id_never_reaches_repository():
    repository = AsyncMock()
    service = UserService(repository)
    with pytest.raises(ZeroIdError):
        await service.insert_user_details(_user(0))
    repository.insert.assert_not_awaited()


async def test_update_user_details_replaces_record(user_service, seed_users):
    await user_service.update_user_details(
        _user(2, email="gopi@gmail.com", name="gopi k", age=24),
    )
    user = await user_service.fetch_user_details_by_id(2)
    assert user.name == "gopi k"
    assert user.age == 24
    assert user.phone == "1112223334"


async def test_update_missing_user_raises_not_found(user_service, seed_users):
    with pytest.raises(UserNotFoundError):
        await user_service.update_user_details(_user(42))


async def test_delete_user_details_by_id_removes_record(user_service, seed_users):
    await user_service.delete_user_details_by_id(2)
    with pytest.raises(UserNotFoundError):
        await user_service.fetch_user_details_by_id(2)
    assert [u.id for u in await user_service.fetch_all_user_details()] == [3]


async def test_delete_missing_user_raises_not_found(user_service, seed_users):
    with pytest.raises(UserNotFoundError):
        await user_service.delete_user_details_by_id(42)


async def test_delete_zero_id_never_reaches_repository():
    repository = AsyncMock()
    service = UserService(repository)
    with pytest.raises(ZeroIdError):
        await service.delete_user_details_by_id(0)
    repository.delete.assert_not_awaited()
