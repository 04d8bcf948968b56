"""FastAPI Dependencies — per-request wiring of guard, services, and primitives.

Invariants:
    - TokenCodec and PasswordHasher are built once by create_app() and read
      from app.state; request handling never rebuilds them from the environment
    - get_db is resolved once per request (FastAPI dependency cache), so the
      guard and the service share one session
    - require_identity returns the ActingIdentity value; routes pass it on
      explicitly to the service call
"""

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import ActingIdentity
from blog_api.infrastructure.database import get_db
from blog_api.infrastructure.password_hasher import PasswordHasher
from blog_api.infrastructure.repositories import (
    SqlAccountRepository, SqlPostRepository,
)
from blog_api.infrastructure.token_codec import TokenCodec
from blog_api.services.access_guard import AccessGuard
from blog_api.services.auth_service import AuthService
from blog_api.services.post_service import PostService


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def require_identity(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
) -> ActingIdentity:
    """Access Guard as a dependency: 401/403 raised before the route body runs."""
    guard = AccessGuard(codec, SqlAccountRepository(db))
    return await guard.authenticate(authorization)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthService:
    return AuthService(SqlAccountRepository(db), hasher, codec)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(SqlPostRepository(db))
