"""Token endpoint schemas."""

from __future__ import annotations

from pydantic import Field

from recipes_api.schemas.base import APIRequest, APIResponse


class TokenRequest(APIRequest):
    """Credentials of a configured user."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(APIResponse):
    """Issued access token."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds")
