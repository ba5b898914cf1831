"""Pydantic DTOs for login and token verification."""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=320, examples=["admin@example.com"])
    password: str = Field(..., min_length=1, max_length=1024)


class TokenResponse(BaseModel):
    """Signed session token returned on successful login."""

    token: str
    token_type: str = Field("bearer", alias="tokenType")
    expires_at: datetime = Field(..., alias="expiresAt")

    model_config = {"populate_by_name": True}


class CurrentUserResponse(BaseModel):
    id: int
    email: str
    name: str

    model_config = {"from_attributes": True}
