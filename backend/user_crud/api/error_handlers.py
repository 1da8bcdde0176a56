"""Error Handlers - response rendering for UserCrudError and global exception handlers.

Invariants:
    - UserCrudError → plain-text body holding exactly exc.message
    - Status is 200 for every handled error unless distinct status codes are enabled,
      then exc.http_status
    - The status setting is resolved per request from get_settings, honouring
      dependency overrides, the same source the user routes read
    - Exception (catch-all) → "internal error", HTTP 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (UserCrudError), catch-all (Exception)
    - No RequestValidationError handler: user routes take raw query strings and raw
      bodies, so malformed input is rendered by UserHandler, never by FastAPI validation
    - render_error shared by UserHandler and the global handler: one mapping from
      ErrorKind to the wire
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from user_crud.config import get_settings
from user_crud.core.errors import ErrorKind, UserCrudError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"


def render_error(
    exc: UserCrudError, distinct_status_codes: bool = False,
) -> PlainTextResponse:
    """Map a domain error to its response body (and optionally its status)."""
    status_code = exc.http_status if distinct_status_codes else status.HTTP_200_OK
    return PlainTextResponse(exc.message, status_code=status_code)


def log_error(exc: UserCrudError, path: str) -> None:
    extra = {**exc.log_extra(), "path": path}
    if exc.kind is ErrorKind.STORAGE_FAILURE:
        logger.error(f"UserCrudError: {exc.message}", extra=extra)
    else:
        logger.info(f"Request rejected: {exc.message}", extra=extra)


def distinct_status_codes_enabled(request: Request) -> bool:
    """Current distinct_status_codes setting as the routes would see it."""
    provider = request.app.dependency_overrides.get(get_settings, get_settings)
    return provider().distinct_status_codes


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_crud_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_crud_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(UserCrudError)
    async def user_crud_error_handler(request: Request, exc: UserCrudError):
        log_error(exc, request.url.path)
        return render_error(exc, distinct_status_codes_enabled(request))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
