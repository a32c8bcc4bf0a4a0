"""Authentication and authorization.

- Caller identity from the configured auth provider
- Access token issuing for the configured default users
- Ownership checks for recipes and groups
"""

from recipes_api.auth.dependencies import CurrentUser, get_current_user
from recipes_api.auth.jwt import authenticate_user, create_access_token
from recipes_api.auth.policy import ensure_owner, is_owner


__all__ = [
    "CurrentUser",
    "authenticate_user",
    "create_access_token",
    "ensure_owner",
    "get_current_user",
    "is_owner",
]
