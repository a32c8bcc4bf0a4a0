"""Header-based authentication provider.

Trusts the caller id found in a request header. Use this only for local
development, tests, or behind a gateway that has already authenticated the
caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipes_api.auth.providers.exceptions import AuthenticationError
from recipes_api.auth.providers.models import AuthResult
from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_logger(__name__)


class HeaderAuthProvider:
    """Extracts the caller from request headers.

    Attributes:
        user_id_header: Header name containing the user ID (required).
    """

    def __init__(self, user_id_header: str = "X-User-ID") -> None:
        self.user_id_header = user_id_header

    @property
    def provider_name(self) -> str:
        """Return provider name for logging."""
        return "header"

    async def validate_token(
        self,
        _token: str,
        request: Request | None = None,
    ) -> AuthResult:
        """Read the caller from request headers; the token is ignored.

        Raises:
            AuthenticationError: If request is None or user ID header is missing.
        """
        if request is None:
            msg = "HeaderAuthProvider requires request object for header access"
            raise AuthenticationError(msg)

        user_id = request.headers.get(self.user_id_header, "").strip()
        if not user_id:
            msg = f"Missing required header: {self.user_id_header}"
            raise AuthenticationError(msg)

        logger.debug("Authenticated via headers", user_id=user_id)

        return AuthResult(
            user_id=user_id,
            token_type="header",  # noqa: S106 - not a password
            raw_claims={"source": "headers"},
        )

    async def initialize(self) -> None:
        """Initialize the provider."""
        logger.info("HeaderAuthProvider initialized", user_id_header=self.user_id_header)
        logger.warning(
            "HeaderAuthProvider is enabled - ensure this is only used in "
            "development/testing or behind a trusted gateway"
        )

    async def shutdown(self) -> None:
        """Shutdown the provider. No cleanup needed."""
        logger.debug("HeaderAuthProvider shutdown")
