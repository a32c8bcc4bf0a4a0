"""Authentication provider protocol definition."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from starlette.requests import Request

    from recipes_api.auth.providers.models import AuthResult


@runtime_checkable
class AuthProvider(Protocol):
    """Protocol for authentication providers.

    A provider turns a bearer token (or, for header mode, the request
    headers) into an AuthResult, and has a startup/shutdown lifecycle.
    """

    @property
    def provider_name(self) -> str:
        """Short name used in logs, e.g. 'local_jwt' or 'header'."""
        ...

    async def validate_token(
        self,
        token: str,
        request: Request | None = None,
    ) -> AuthResult:
        """Validate a credential and return the authenticated caller.

        Raises:
            TokenExpiredError: If the token has expired.
            TokenInvalidError: If the token is malformed or signature fails.
            AuthenticationError: For other authentication failures.
        """
        ...

    async def initialize(self) -> None:
        """Prepare the provider during application startup."""
        ...

    async def shutdown(self) -> None:
        """Release provider resources during application shutdown."""
        ...
