"""Auth Routes — POST /register and POST /login.

Invariants:
    - Bodies are passed to AuthService unparsed; the service owns validation
      so the 400 message is the first violated rule
    - Responses carry id/email (and createdAt on register) — never the hash
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from blog_api.api.dependencies import get_auth_service
from blog_api.schemas.auth import AccountPublic, AccountSummary
from blog_api.schemas.envelope import success
from blog_api.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: Any = Body(None),
    service: AuthService = Depends(get_auth_service),
):
    """Create an account."""
    account = await service.register(payload)
    user = AccountPublic.model_validate(account)
    return success(
        data={"user": user.model_dump(mode="json", by_alias=True)},
        message="User registered successfully",
    )


@router.post("/login")
async def login(
    payload: Any = Body(None),
    service: AuthService = Depends(get_auth_service),
):
    """Exchange credentials for a one-hour bearer token."""
    outcome = await service.login(payload)
    user = AccountSummary.model_validate(outcome.identity)
    return success(
        data={"token": outcome.token, "user": user.model_dump(mode="json")},
        message="Login successful",
    )
