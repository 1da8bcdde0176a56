"""User Handler - translates HTTP input into UserService calls and responses.

Invariants:
    - Parse failures (id, body) respond before any service call
    - id == 0 on create/update/delete responds "Id shouldn't be zero" before any
      service call
    - create/update call email_validation first; a False result responds with the
      duplicate-email text and never reaches insert/update
    - Every UserCrudError, from any step, becomes its message as the response body
    - Success bodies: fixed status text, or JSON with keys Id, Name, Email, Phone, Age

Design Decisions:
    - Service injected at construction (UserServiceLike Protocol): no module-level state
    - Methods take the raw query value / raw body bytes: FastAPI's own validation
      would answer with its JSON error shape instead of the plain-text contract
"""

import logging

from fastapi import Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from user_crud.api.error_handlers import log_error, render_error
from user_crud.core.errors import (
    DuplicateEmailError, InvalidParameterError, UserCrudError, INVALID_BODY_MESSAGE,
)
from user_crud.core.repository_protocols import UserServiceLike
from user_crud.core.validate_user import check_id_nonzero, parse_user_id
from user_crud.schemas.user import UserSchema, dump_user_list, parse_user_json

logger = logging.getLogger(__name__)

USER_CREATED = "User created"
USER_UPDATED = "User updated"
USER_DELETED = "User deleted successfully"

JSON_MEDIA_TYPE = "application/json"


class UserHandler:
    """One method per verb/route pair."""

    def __init__(
        self, service: UserServiceLike, distinct_status_codes: bool = False,
    ):
        self.service = service
        self.distinct_status_codes = distinct_status_codes

    async def get_user_by_id(self, raw_id: str | None) -> Response:
        """GET /user?id= → JSON User."""
        try:
            user_id = parse_user_id(raw_id)
            user = await self.service.fetch_user_details_by_id(user_id)
        except UserCrudError as exc:
            return self._error(exc, "/user")
        return Response(user.to_json(), media_type=JSON_MEDIA_TYPE)

    async def get_users(self) -> Response:
        """GET /users → JSON array of User."""
        try:
            users = await self.service.fetch_all_user_details()
        except UserCrudError as exc:
            return self._error(exc, "/users")
        return Response(dump_user_list(users), media_type=JSON_MEDIA_TYPE)

    async def post_user(self, body: bytes) -> Response:
        """POST /insert → "User created"."""
        try:
            user = _parse_body(body)
            check_id_nonzero(user.id)
            if not await self.service.email_validation(user.email):
                raise DuplicateEmailError(user.email)
            await self.service.insert_user_details(user)
        except UserCrudError as exc:
            return self._error(exc, "/insert")
        logger.info(USER_CREATED, extra={"user_id": user.id})
        return PlainTextResponse(USER_CREATED)

    async def update_user(self, body: bytes) -> Response:
        """PUT /update → "User updated". Same checks as post_user."""
        try:
            user = _parse_body(body)
            check_id_nonzero(user.id)
            if not await self.service.email_validation(
                user.email, exclude_id=user.id,
            ):
                raise DuplicateEmailError(user.email)
            await self.service.update_user_details(user)
        except UserCrudError as exc:
            return self._error(exc, "/update")
        logger.info(USER_UPDATED, extra={"user_id": user.id})
        return PlainTextResponse(USER_UPDATED)

    async def delete_user(self, raw_id: str | None) -> Response:
        """DELETE /delete?id= → "User deleted successfully"."""
        try:
            user_id = parse_user_id(raw_id)
            check_id_nonzero(user_id)
            await self.service.delete_user_details_by_id(user_id)
        except UserCrudError as exc:
            return self._error(exc, "/delete")
        logger.info(USER_DELETED, extra={"user_id": user_id})
        return PlainTextResponse(USER_DELETED)

    def _error(self, exc: UserCrudError, path: str) -> Response:
        log_error(exc, path)
        return render_error(exc, self.distinct_status_codes)


def _parse_body(body: bytes) -> UserSchema:
    try:
        return parse_user_json(body)
    except ValidationError as e:
        logger.debug(f"Malformed user body: {e}")
        raise InvalidParameterError(INVALID_BODY_MESSAGE)
