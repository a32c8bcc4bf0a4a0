"""Authentication provider models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AuthResult(BaseModel):
    """Result of successful caller authentication.

    Attributes:
        user_id: Identifier of the caller; recipes and groups are owned by it.
        token_type: What authenticated the caller (access, header, none).
        expires_at: Token expiration timestamp, when a token was used.
        raw_claims: Original token claims for debugging/auditing.
    """

    user_id: str = Field(..., description="Caller identifier")
    token_type: str = Field(default="access", description="Type of credential")
    expires_at: int | None = Field(default=None, description="Expiration timestamp")
    raw_claims: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}
