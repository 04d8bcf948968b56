"""Auth Service — registration and login flows.

Invariants:
    - Password hash never leaves this service in a return value
    - Unknown email and wrong password raise the same InvalidCredentialsError
    - Registration checks the email before hashing; a duplicate that races
      past the check is still reported as ConflictError by the store
    - Every unexpected failure collapses to InternalError (services/base.py)
"""

import logging
from dataclasses import dataclass

from blog_api.core.domain_types import ActingIdentity, AccountId
from blog_api.core.errors import ConflictError, InvalidCredentialsError
from blog_api.core.repository_protocols import AccountLike, AccountRepository
from blog_api.infrastructure.password_hasher import PasswordHasher
from blog_api.infrastructure.token_codec import TokenCodec
from blog_api.schemas.auth import LoginRequest, RegisterRequest
from blog_api.schemas.validation import validate_body
from blog_api.services.base import internal_error_boundary, unwrap

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "Email already registered"


@dataclass(frozen=True)
class LoginOutcome:
    token: str
    identity: ActingIdentity


class AuthService:
    """Register accounts and exchange credentials for bearer tokens."""

    def __init__(
        self,
        accounts: AccountRepository,
        hasher: PasswordHasher,
        codec: TokenCodec,
    ):
        self.accounts = accounts
        self.hasher = hasher
        self.codec = codec

    async def register(self, payload: object) -> AccountLike:
        with internal_error_boundary("register"):
            body = unwrap(validate_body(RegisterRequest, payload), "register")

            existing = unwrap(
                await self.accounts.find_by_email(body.email), "register",
            )
            if existing is not None:
                raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

            password_hash = unwrap(
                await self.hasher.hash(body.password), "register",
            )
            account = unwrap(
                await self.accounts.create(body.email, password_hash),
                "register",
                conflict_message=DUPLICATE_EMAIL_MESSAGE,
            )
            logger.info("Account registered", extra={"account_id": account.id})
            return account

    async def login(self, payload: object) -> LoginOutcome:
        with internal_error_boundary("login"):
            body = unwrap(validate_body(LoginRequest, payload), "login")

            account = unwrap(
                await self.accounts.find_by_email(body.email), "login",
            )
            if account is None:
                raise InvalidCredentialsError()

            matches = unwrap(
                await self.hasher.verify(body.password, account.password_hash),
                "login",
            )
            if not matches:
                raise InvalidCredentialsError()

            token = unwrap(self.codec.issue(account.id), "login")
            return LoginOutcome(
                token=token,
                identity=ActingIdentity(
                    id=AccountId(account.id), email=account.email,
                ),
            )
