"""Error Hierarchy — typed exceptions for every Blog API failure mode.

Invariants:
    - Every error has a code (str), a user-facing message, and an http_status
    - to_response() produces the error envelope: {"status": "error", "message": ...}
    - 500-level errors always carry the generic message; causes go to the log only

Design Decisions:
    - Single hierarchy with BlogError base: one FastAPI handler renders them all
    - Messages are fixed per class so equal failures yield byte-identical bodies
      (login never reveals whether the email exists)
"""

INTERNAL_ERROR_MESSAGE = "Internal server error"


class BlogError(Exception):
    """Base exception for all Blog API errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {"status": "error", "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(BlogError):
    """Request body failed schema validation."""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR", 400)


class UnauthenticatedError(BlogError):
    """No usable bearer token on the request."""
    def __init__(self):
        super().__init__("Access token required", "UNAUTHENTICATED", 401)


class UnknownAccountError(BlogError):
    """Token verified but its account no longer exists."""
    def __init__(self):
        super().__init__("Invalid token", "UNKNOWN_ACCOUNT", 401)


class InvalidCredentialsError(BlogError):
    """Unknown email or wrong password — deliberately indistinguishable."""
    def __init__(self):
        super().__init__(
            "Invalid email or password", "INVALID_CREDENTIALS", 401,
        )


class InvalidTokenError(BlogError):
    """Token expired, malformed, badly signed, or unresolvable."""
    def __init__(self):
        super().__init__("Invalid or expired token", "INVALID_TOKEN", 403)


class NotOwnerError(BlogError):
    """Acting account is not the post's author."""
    def __init__(self, action: str):
        super().__init__(
            f"You can only {action} your own posts", "NOT_OWNER", 403,
        )
        self.action = action


class ResourceNotFoundError(BlogError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str):
        super().__init__(
            f"{resource_type} not found", "RESOURCE_NOT_FOUND", 404,
        )
        self.resource_type = resource_type


class ConflictError(BlogError):
    """Write would violate a uniqueness constraint."""
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", 409)


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(BlogError):
    """Anything unexpected. The message never carries internal detail."""
    def __init__(self, code: str = "INTERNAL_ERROR"):
        super().__init__(INTERNAL_ERROR_MESSAGE, code, 500)


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(self, operation: str):
        super().__init__("DATABASE_ERROR")
        self.operation = operation
