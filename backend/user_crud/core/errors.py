"""Error Hierarchy - tagged exceptions for every user CRUD failure mode.

Invariants:
    - Every error has a kind (ErrorKind), code (str), message (str), http_status (int)
    - message is the exact text written to the response body
    - Input and business-rule errors (INVALID_INPUT, ZERO_ID, DUPLICATE_EMAIL) are
      raised before any persistence call
    - STORAGE_FAILURE carries the raw storage error text

Design Decisions:
    - Single hierarchy with UserCrudError base: one FastAPI handler catches all
    - ErrorKind is the tag; http_status is only used when distinct status codes are enabled
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorKind(str, Enum):
    """Every way a user request can fail."""
    INVALID_INPUT = "invalid_input"
    ZERO_ID = "zero_id"
    DUPLICATE_EMAIL = "duplicate_email"
    NOT_FOUND = "not_found"
    STORAGE_FAILURE = "storage_failure"


# Response bodies clients match on byte-for-byte
INVALID_ID_MESSAGE = "invalid parameter id"
INVALID_BODY_MESSAGE = "invalid request body"
ZERO_ID_MESSAGE = "Id shouldn't be zero"
DUPLICATE_EMAIL_MESSAGE = "email already present - could not create user"
NOT_FOUND_MESSAGE = "user not found"


@dataclass
class ErrorContext:
    """Extra context surfaced in logs, never in response bodies."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    operation: str | None = None


class UserCrudError(Exception):
    """Base exception for all user CRUD errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.context = context or ErrorContext()
        self.http_status = http_status

    def log_extra(self) -> dict:
        """Fields for structured logging (see infrastructure/observability.py)."""
        return {
            "error_code": self.code,
            "error_kind": self.kind.value,
            "user_id": self.context.user_id,
            "operation": self.context.operation,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidParameterError(UserCrudError):
    """Query id or JSON body could not be parsed."""
    def __init__(
        self, message: str = INVALID_ID_MESSAGE, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_INPUT", ErrorKind.INVALID_INPUT, context, 400,
        )


class ZeroIdError(UserCrudError):
    """Create/update/delete attempted with id 0."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            ZERO_ID_MESSAGE, "ZERO_ID", ErrorKind.ZERO_ID, context, 400,
        )


class DuplicateEmailError(UserCrudError):
    """Email is malformed or already used by another user."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            DUPLICATE_EMAIL_MESSAGE, "DUPLICATE_EMAIL",
            ErrorKind.DUPLICATE_EMAIL, context, 409,
        )
        self.email = email


class UserNotFoundError(UserCrudError):
    """No stored user with the requested id."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            NOT_FOUND_MESSAGE, "USER_NOT_FOUND", ErrorKind.NOT_FOUND, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageFailureError(UserCrudError):
    """Persistence operation failed. Message is the raw storage error."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "STORAGE_FAILURE", ErrorKind.STORAGE_FAILURE, ctx, 503,
        )
        self.operation = operation
