"""JWT access token issuing.

Tokens are HS256-signed with the secret the local_jwt provider validates
against, so a token issued here authenticates the caller on every route.
"""

from __future__ import annotations

import hmac
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from jose import jwt

from recipes_api.auth.providers.factory import get_jwt_secret
from recipes_api.core.config import get_settings
from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from recipes_api.core.config import Settings
    from recipes_api.core.config.settings import DefaultUser


logger = get_logger(__name__)


def create_access_token(
    subject: str,
    *,
    expires_delta: timedelta | None = None,
    settings: Settings | None = None,
) -> str:
    """Create a new JWT access token.

    Args:
        subject: The subject of the token (the user id).
        expires_delta: Custom lifetime. If None, uses the configured default.
        settings: Application settings.

    Returns:
        Encoded JWT token string.
    """
    settings = settings or get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.auth.jwt.access_token_expire_minutes)

    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": subject,
        "exp": now + expires_delta,
        "iat": now,
        "type": "access",
    }
    if settings.auth.jwt.issuer:
        payload["iss"] = settings.auth.jwt.issuer
    if settings.auth.jwt.audience:
        payload["aud"] = settings.auth.jwt.audience

    return jwt.encode(
        payload,
        get_jwt_secret(settings),
        algorithm=settings.auth.jwt.algorithm,
    )


def authenticate_user(
    username: str,
    password: str,
    settings: Settings | None = None,
) -> DefaultUser | None:
    """Check credentials against the configured default users.

    Returns:
        The matching user, or None when the credentials are wrong.
    """
    settings = settings or get_settings()

    for user in settings.users.default_users:
        if user.username == username and hmac.compare_digest(
            user.password.encode(), password.encode()
        ):
            return user

    logger.info("Rejected token request", username=username)
    return None
