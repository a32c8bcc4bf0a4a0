"""Authentication providers package.

Pluggable providers implementing the AuthProvider protocol; the factory
creates the one selected by configuration.

Available providers:
- LocalJWTAuthProvider: Validates JWTs locally
- HeaderAuthProvider: Extracts user from headers (development only)
- DisabledAuthProvider: Every caller is anonymous
"""

from recipes_api.auth.providers.exceptions import (
    AuthenticationError,
    AuthProviderError,
    ConfigurationError,
    TokenExpiredError,
    TokenInvalidError,
)
from recipes_api.auth.providers.factory import (
    ANONYMOUS_USER_ID,
    DisabledAuthProvider,
    create_auth_provider,
    get_auth_provider,
    get_jwt_secret,
    initialize_auth_provider,
    set_auth_provider,
    shutdown_auth_provider,
)
from recipes_api.auth.providers.header import HeaderAuthProvider
from recipes_api.auth.providers.local_jwt import LocalJWTAuthProvider
from recipes_api.auth.providers.models import AuthResult
from recipes_api.auth.providers.protocol import AuthProvider


__all__ = [
    "ANONYMOUS_USER_ID",
    "AuthProvider",
    "AuthProviderError",
    "AuthResult",
    "AuthenticationError",
    "ConfigurationError",
    "DisabledAuthProvider",
    "HeaderAuthProvider",
    "LocalJWTAuthProvider",
    "TokenExpiredError",
    "TokenInvalidError",
    "create_auth_provider",
    "get_auth_provider",
    "get_jwt_secret",
    "initialize_auth_provider",
    "set_auth_provider",
    "shutdown_auth_provider",
]
