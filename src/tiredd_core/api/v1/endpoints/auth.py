# src/tiredd_core/api/v1/endpoints/auth.py
"""Authentication endpoints for the Tiredd API."""

from __future__ import annotations

from fastapi import APIRouter, status

from tiredd_core.api.v1.dependencies import AccountsDep, IdentityDep
from tiredd_core.schemas.auth import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    ReadSessionResponse,
    SessionRequest,
    SessionResponse,
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/login",
    summary="Authenticate with username and password",
    response_model=LoginResponse,
)
def login(payload: LoginRequest, accounts: AccountsDep) -> LoginResponse:
    """Open a session, registering the account first if it is new."""
    account, token, session = accounts.login(payload.username, payload.password)
    return LoginResponse(
        session_id=token,
        account=AccountResponse.model_validate(account),
        session=SessionResponse.model_validate(session),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(payload: SessionRequest, accounts: AccountsDep) -> None:
    """Destroy the session behind the supplied token."""
    accounts.logout(payload.session_id)


@router.post("/session", response_model=ReadSessionResponse)
def read_session(payload: SessionRequest, identity: IdentityDep) -> ReadSessionResponse:
    """Return the account and session behind a token."""
    account, session = identity.read_session(payload.session_id)
    return ReadSessionResponse(
        account=AccountResponse.model_validate(account),
        session=SessionResponse.model_validate(session),
    )
