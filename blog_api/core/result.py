"""Collaborator Results — explicit success/failure values at IO boundaries.

Invariants:
    - Repositories, the password hasher, the token codec, and the body
      validator return Ok or Err; they never raise for expected failures
    - Err.kind is the only thing services branch on; Err.detail is for logs

Design Decisions:
    - Frozen dataclasses; call sites branch with isinstance()
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a collaborator call failed."""
    INVALID_INPUT = "invalid_input"      # body failed schema validation
    DUPLICATE = "duplicate"              # unique constraint hit
    STORE_FAILURE = "store_failure"      # connectivity / driver / SQL error
    HASH_FAILURE = "hash_failure"        # bcrypt rejected input or stored hash
    TOKEN_REJECTED = "token_rejected"    # expired, tampered, malformed
    SIGNING_FAILURE = "signing_failure"  # token could not be issued


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: FailureKind
    detail: str = ""


Result = Union[Ok[T], Err]
