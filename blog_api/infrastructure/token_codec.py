"""Token Codec — signs and verifies stateless JWT bearer tokens.

Invariants:
    - Claims are exactly {sub: account id, iat, exp}; exp = iat + ttl
    - verify() requires all three claims and a valid signature under the
      configured algorithm; anything else is Err(TOKEN_REJECTED)
    - The secret is held by the codec instance, built once from Settings

Design Decisions:
    - PyJWT over python-jose: maintained, and HS256 is all that is needed
    - Clock injectable: expiry is tested without sleeping
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from blog_api.config import Settings
from blog_api.core.result import Err, FailureKind, Ok, Result

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded, verified bearer token contents."""
    account_id: str
    issued_at: datetime
    expires_at: datetime


class TokenCodec:
    """HMAC-signed JWTs with a fixed lifetime."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int = 3600,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(
            secret=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            ttl_seconds=settings.jwt_expire_seconds,
        )

    def issue(self, account_id: str) -> Result[str]:
        now = self._clock()
        payload = {"sub": account_id, "iat": now, "exp": now + self.ttl}
        try:
            return Ok(jwt.encode(payload, self._secret, algorithm=self.algorithm))
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            return Err(FailureKind.SIGNING_FAILURE, str(e))

    def verify(self, token: str) -> Result[TokenClaims]:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as e:
            return Err(FailureKind.TOKEN_REJECTED, str(e))
        sub = payload["sub"]
        if not isinstance(sub, str) or not sub:
            return Err(FailureKind.TOKEN_REJECTED, "subject must be a non-empty string")
        return Ok(TokenClaims(
            account_id=sub,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        ))
