"""Boundary Protocols — contracts between core services and the persistence shell.

Invariants:
    - Services NEVER import the SQL repositories — only these Protocols
    - Every method returns a Result; expected failures are never raised
    - find_identity projects to id+email; the hash never leaves the store there

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from datetime import datetime
from typing import Protocol

from blog_api.core.domain_types import ActingIdentity
from blog_api.core.result import Result


class AccountLike(Protocol):
    """Structural contract for stored accounts."""
    id: str
    email: str
    password_hash: str
    created_at: datetime


class AuthorLike(Protocol):
    id: str
    email: str


class PostLike(Protocol):
    """Structural contract for stored posts with their author loaded."""
    id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    author: AuthorLike


class AccountRepository(Protocol):
    """Credential Store contract — implemented by infrastructure/repositories.py."""
    async def find_by_email(self, email: str) -> Result[AccountLike | None]: ...
    async def find_identity(
        self, account_id: str,
    ) -> Result[ActingIdentity | None]: ...
    async def create(
        self, email: str, password_hash: str,
    ) -> Result[AccountLike]: ...


class PostRepository(Protocol):
    """Post Store contract — implemented by infrastructure/repositories.py."""
    async def list_newest_first(self) -> Result[list[PostLike]]: ...
    async def get(self, post_id: str) -> Result[PostLike | None]: ...
    async def create(
        self, title: str, content: str, author_id: str,
    ) -> Result[PostLike]: ...
    async def update(
        self, post: PostLike, changes: dict[str, str],
    ) -> Result[PostLike]: ...
    async def delete(self, post: PostLike) -> Result[None]: ...
