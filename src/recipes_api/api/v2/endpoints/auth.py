"""Token endpoint (v2).

Exchanges the credentials of a configured default user for a signed
access token accepted by the local_jwt auth mode.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipes_api.api.dependencies import get_app_settings
from recipes_api.auth.jwt import authenticate_user, create_access_token
from recipes_api.core.config import Settings
from recipes_api.core.exceptions import ErrorResponse, UnauthorizedError
from recipes_api.observability.logging import get_logger
from recipes_api.schemas import TokenRequest, TokenResponse


logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/token",
    response_model=TokenResponse,
    summary="Issue an access token",
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def issue_token(
    body: TokenRequest,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TokenResponse:
    user = authenticate_user(body.username, body.password, settings)
    if user is None:
        raise UnauthorizedError("Invalid username or password")

    token = create_access_token(user.username, settings=settings)
    logger.info("Access token issued", username=user.username)

    return TokenResponse(
        access_token=token,
        expires_in=settings.auth.jwt.access_token_expire_minutes * 60,
    )
