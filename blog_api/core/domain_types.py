"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AccountId and PostId wrap opaque strings — never compare across kinds
    - ActingIdentity carries id and email only, never the password hash
    - Valid post mutations encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost
    - ActingIdentity is a frozen dataclass: it is threaded explicitly from the
      guard into each service call and must not be mutated on the way
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", str)
PostId = NewType("PostId", str)


@dataclass(frozen=True)
class ActingIdentity:
    """The account resolved from a verified bearer token for one request."""
    id: AccountId
    email: str


# ─── Enums ───────────────────────────────────────────────────────

class PostAction(str, Enum):
    """Mutations gated on ownership — value is used in the 403 message."""
    UPDATE = "update"
    DELETE = "delete"
