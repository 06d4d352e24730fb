"""Authentication-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")


class SessionRequest(BaseModel):
    """Request carrying only a session token."""

    session_id: str | None = Field(None, description="Opaque session token")


class AccountResponse(BaseModel):
    """Public account information."""

    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class SessionResponse(BaseModel):
    """Session metadata; never includes the token itself."""

    account_id: int
    created_at: datetime
    expires_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    session_id: str = Field(..., description="Opaque session token, shown only once")
    account: AccountResponse
    session: SessionResponse


class ReadSessionResponse(BaseModel):
    """Account and session behind a token."""

    account: AccountResponse
    session: SessionResponse
