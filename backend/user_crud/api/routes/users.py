"""User Routes - the five user endpoints and their dependency providers.

Invariants:
    - GET /user, GET /users, POST /insert, PUT /update, DELETE /delete
    - Each request builds its own chain: AsyncSession → SqlUserRepository →
      UserService → UserHandler
    - The id query parameter reaches the handler unparsed

Design Decisions:
    - get_user_service is the override point for tests (replaces the whole service)
    - Body read as raw bytes: parse errors answer with the plain-text contract
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from user_crud.api.user_handler import UserHandler
from user_crud.config import Settings, get_settings
from user_crud.core.repository_protocols import UserServiceLike
from user_crud.infrastructure.database import get_db
from user_crud.infrastructure.user_repository import SqlUserRepository
from user_crud.services.user_service import UserService

router = APIRouter(tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserServiceLike:
    return UserService(SqlUserRepository(db))


def get_user_handler(
    service: UserServiceLike = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
) -> UserHandler:
    return UserHandler(
        service, distinct_status_codes=settings.distinct_status_codes,
    )


@router.get("/user")
async def get_user_by_id(
    raw_id: str | None = Query(None, alias="id"),
    handler: UserHandler = Depends(get_user_handler),
):
    """Get one user by id."""
    return await handler.get_user_by_id(raw_id)


@router.get("/users")
async def get_users(handler: UserHandler = Depends(get_user_handler)):
    """List all users."""
    return await handler.get_users()


@router.post("/insert")
async def post_user(
    request: Request, handler: UserHandler = Depends(get_user_handler),
):
    """Create a user with a caller-assigned id."""
    return await handler.post_user(await request.body())


@router.put("/update")
async def update_user(
    request: Request, handler: UserHandler = Depends(get_user_handler),
):
    """Replace an existing user."""
    return await handler.update_user(await request.body())


@router.delete("/delete")
async def delete_user(
    raw_id: str | None = Query(None, alias="id"),
    handler: UserHandler = Depends(get_user_handler),
):
    """Delete a user by id."""
    return await handler.delete_user(raw_id)
