"""Access Guard — authenticates a bearer token into an Acting Identity.

Invariants:
    - Missing/malformed header        → UnauthenticatedError (401)
    - Token rejected OR lookup failed → InvalidTokenError (403), indistinguishable
    - Token valid, account gone       → UnknownAccountError (401)
    - Stateless: no writes, no caching, one lookup per call
"""

import logging

from blog_api.core.domain_types import ActingIdentity
from blog_api.core.enforce_access import extract_bearer_token
from blog_api.core.errors import (
    InvalidTokenError, UnauthenticatedError, UnknownAccountError,
)
from blog_api.core.repository_protocols import AccountRepository
from blog_api.core.result import Err
from blog_api.infrastructure.token_codec import TokenCodec

logger = logging.getLogger(__name__)


class AccessGuard:
    """Per-request authentication decision."""

    def __init__(self, codec: TokenCodec, accounts: AccountRepository):
        self.codec = codec
        self.accounts = accounts

    async def authenticate(self, authorization: str | None) -> ActingIdentity:
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError()

        claims = self.codec.verify(token)
        if isinstance(claims, Err):
            logger.info(f"Bearer token rejected: {claims.detail}")
            raise InvalidTokenError()

        try:
            lookup = await self.accounts.find_identity(claims.value.account_id)
        except Exception as e:
            logger.warning(
                f"Identity lookup raised: {e}", exc_info=True,
                extra={"account_id": claims.value.account_id},
            )
            raise InvalidTokenError() from e
        if isinstance(lookup, Err):
            logger.warning(
                f"Identity lookup failed: {lookup.detail}",
                extra={"account_id": claims.value.account_id},
            )
            raise InvalidTokenError()

        if lookup.value is None:
            raise UnknownAccountError()
        return lookup.value
