"""User Input Validation - pure checks applied before any service call.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - parse_user_id accepts only an optional sign followed by ASCII digits,
      within the signed 64-bit range
    - check_id_nonzero raises ZeroIdError for 0, returns None otherwise
    - is_well_formed_email checks format only; uniqueness needs the repository

Design Decisions:
    - Failures raise UserCrudError subclasses; api/error_handlers.py renders them
"""

import re

from user_crud.core.domain_types import INT64_MAX, INT64_MIN, UserId
from user_crud.core.errors import InvalidParameterError, ZeroIdError

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# local@domain.tld - no whitespace, exactly one @, dotted domain
_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+",
)

MAX_EMAIL_LENGTH = 254


def parse_user_id(raw: str | None) -> UserId:
    """Parse the `id` query parameter.

    Missing, non-integer or outside int64 -> InvalidParameterError.
    """
    if raw is None or not _ID_PATTERN.fullmatch(raw):
        raise InvalidParameterError()
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidParameterError()
    return UserId(value)


def check_id_nonzero(user_id: int) -> None:
    """Writes require a caller-assigned, non-zero id."""
    if user_id == 0:
        raise ZeroIdError()


def is_well_formed_email(email: str) -> bool:
    if not email or len(email) > MAX_EMAIL_LENGTH:
        return False
    local = email.rpartition("@")[0]
    if local.startswith(".") or local.endswith(".") or ".." in local:
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None
