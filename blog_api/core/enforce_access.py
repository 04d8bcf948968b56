"""Bearer Header Parsing — pure extraction of the token from an Authorization header.

Invariants:
    - Returns the token only for the exact shape "Bearer <non-empty token>"
    - Scheme comparison is case-insensitive (RFC 7235); the token is returned as-is
"""

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the bearer token, or None when the header is missing or malformed."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    token = token.strip()
    if not token or " " in token:
        return None
    return token
