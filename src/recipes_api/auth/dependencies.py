"""FastAPI security dependencies.

The dependencies use the configured auth provider (local_jwt, header, or
disabled) to establish the caller of a request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from recipes_api.auth.providers import (
    AuthenticationError,
    AuthResult,
    TokenExpiredError,
    get_auth_provider,
)
from recipes_api.core.exceptions import UnauthorizedError
from recipes_api.observability.logging import bind_context


# Token extraction only; validation is the provider's job
bearer_scheme = HTTPBearer(
    scheme_name="JWT",
    description="JWT Bearer token from POST /v2/auth/token",
    auto_error=False,
)


class CurrentUser(BaseModel):
    """The authenticated caller of the current request."""

    id: str

    @classmethod
    def from_auth_result(cls, result: AuthResult) -> CurrentUser:
        """Create CurrentUser from an AuthResult."""
        return cls(id=result.user_id)


async def get_auth_result(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> AuthResult:
    """Validate the caller using the configured auth provider.

    Raises:
        UnauthorizedError: If authentication fails.
    """
    token = credentials.credentials if credentials else ""

    try:
        return await get_auth_provider().validate_token(token, request)
    except TokenExpiredError:
        raise UnauthorizedError("Token has expired") from None
    except AuthenticationError as e:
        raise UnauthorizedError(str(e) or "Authentication failed") from None


async def get_current_user(
    auth_result: Annotated[AuthResult, Depends(get_auth_result)],
) -> CurrentUser:
    """Get the current authenticated user.

    This is the primary dependency for protected routes.
    """
    bind_context(user_id=auth_result.user_id)
    return CurrentUser.from_auth_result(auth_result)
