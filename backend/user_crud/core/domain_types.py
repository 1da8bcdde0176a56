"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int - 0 is never a valid id for a write
    - USER_FIELDS is the wire order of the User JSON object
    - Numeric fields fit a signed 64-bit integer (INT64_MIN..INT64_MAX)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Wire Format ─────────────────────────────────────────────────

USER_FIELDS = ("Id", "Name", "Email", "Phone", "Age")

# Ids and ages are stored as signed 64-bit integers
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1
