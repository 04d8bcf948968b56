"""Auth Schemas — registration/login bodies and public account projections.

Invariants:
    - RegisterRequest.password: >= 6 chars; LoginRequest.password: non-empty
    - Unknown keys rejected (extra="forbid")
    - AccountPublic / AccountSummary never carry password_hash

Design Decisions:
    - Emails checked with email-validator but kept exactly as submitted:
      `a@X.com` and `a@x.com` are distinct accounts
    - camelCase aliases on output to keep the wire format stable
"""

from datetime import datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _check_email(value: str) -> str:
    """Reject malformed addresses; return the input unnormalized."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


SubmittedEmail = Annotated[str, AfterValidator(_check_email)]


class RegisterRequest(BaseModel):
    """Registration body."""
    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail
    password: str = Field(min_length=6)


class LoginRequest(BaseModel):
    """Login body."""
    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail
    password: str = Field(min_length=1)


class AccountSummary(BaseModel):
    """Account projection embedded in login responses and post authors."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str


class AccountPublic(BaseModel):
    """Account projection returned by registration."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: str
    email: str
    created_at: datetime
