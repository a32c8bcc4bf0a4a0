"""Authentication provider factory.

Creates the auth provider selected by ``auth.mode`` and holds the instance
used by the request dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipes_api.auth.providers.exceptions import ConfigurationError
from recipes_api.auth.providers.header import HeaderAuthProvider
from recipes_api.auth.providers.local_jwt import LocalJWTAuthProvider
from recipes_api.auth.providers.models import AuthResult
from recipes_api.core.config import AuthMode, get_settings
from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from recipes_api.auth.providers.protocol import AuthProvider
    from recipes_api.core.config import Settings

logger = get_logger(__name__)

ANONYMOUS_USER_ID = "anonymous"

# Fixed development secret - safe for local dev, blocked in production
_DEV_JWT_SECRET = "insecure-dev-key-do-not-use-in-production"  # noqa: S105


def get_jwt_secret(settings: Settings) -> str:
    """Get the JWT secret shared by token signing and validation.

    Raises:
        ConfigurationError: If secret is not set in production.
    """
    if settings.JWT_SECRET_KEY:
        return settings.JWT_SECRET_KEY

    if settings.is_production:
        msg = "JWT_SECRET_KEY must be set in production for local_jwt auth mode"
        raise ConfigurationError(msg)

    return _DEV_JWT_SECRET


# Provider state container (avoids global statement for mutation)
_state: dict[str, AuthProvider | None] = {"provider": None}


class DisabledAuthProvider:
    """Auth provider that treats every caller as the anonymous user."""

    @property
    def provider_name(self) -> str:
        return "disabled"

    async def validate_token(
        self,
        _token: str,
        _request: object = None,
    ) -> AuthResult:
        """Return the anonymous user."""
        return AuthResult(
            user_id=ANONYMOUS_USER_ID,
            token_type="none",  # noqa: S106 - not a password
            raw_claims={"auth_disabled": True},
        )

    async def initialize(self) -> None:
        logger.warning(
            "DisabledAuthProvider initialized - authentication is disabled! "
            "Ensure this is intentional and not a production deployment."
        )

    async def shutdown(self) -> None:
        pass


def create_auth_provider(settings: Settings | None = None) -> AuthProvider:
    """Create an authentication provider based on configuration.

    - LOCAL_JWT: Validates JWTs locally
    - HEADER: Extracts user from headers (development only)
    - DISABLED: Every caller is anonymous

    Raises:
        ConfigurationError: If required settings are missing for the auth mode.
    """
    if settings is None:
        settings = get_settings()

    mode = settings.auth_mode_enum
    logger.info("Creating auth provider", mode=mode.value)

    if mode == AuthMode.DISABLED:
        return DisabledAuthProvider()

    if mode == AuthMode.HEADER:
        return HeaderAuthProvider(
            user_id_header=settings.auth.headers.user_id,
        )

    if mode == AuthMode.LOCAL_JWT:
        secret_key = get_jwt_secret(settings)
        if secret_key == _DEV_JWT_SECRET:
            logger.warning(
                "Using insecure development JWT secret - do not use in production"
            )
        return LocalJWTAuthProvider(
            secret_key=secret_key,
            algorithm=settings.auth.jwt.algorithm,
            issuer=settings.auth.jwt.issuer,
            audience=settings.auth.jwt.audience or None,
        )

    # Should not reach here due to enum validation
    msg = f"Unknown auth mode: {mode}"
    raise ConfigurationError(msg)


def get_auth_provider() -> AuthProvider:
    """Get the current auth provider instance.

    Raises:
        RuntimeError: If the provider has not been initialized.
    """
    provider = _state["provider"]
    if provider is None:
        msg = "Auth provider not initialized. Call set_auth_provider() during startup."
        raise RuntimeError(msg)
    return provider


def set_auth_provider(provider: AuthProvider) -> None:
    """Set the global auth provider instance."""
    _state["provider"] = provider
    logger.info("Auth provider set", provider=provider.provider_name)


async def initialize_auth_provider(settings: Settings | None = None) -> AuthProvider:
    """Create, initialize, and set the auth provider."""
    provider = create_auth_provider(settings)
    await provider.initialize()
    set_auth_provider(provider)
    return provider


async def shutdown_auth_provider() -> None:
    """Shutdown the global auth provider and clear the instance."""
    provider = _state["provider"]
    if provider is not None:
        await provider.shutdown()
        _state["provider"] = None
        logger.info("Auth provider shutdown complete")
