"""Access logging middleware.

Binds the method and path of each request to the logging context and
writes one line when the request starts and one when it completes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipes_api.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

DEFAULT_EXCLUDED_PATHS = frozenset({"/health", "/ready", "/metrics", "/favicon.ico"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request/response logging."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | frozenset[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = (
            DEFAULT_EXCLUDED_PATHS if exclude_paths is None else exclude_paths
        )

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        bind_context(
            method=request.method,
            path=request.url.path,
            client_ip=client_ip(request),
        )
        logger.info(
            "Request started",
            query=str(request.query_params) if request.query_params else None,
        )

        response = await call_next(request)

        log = logger.warning if response.status_code >= 500 else logger.info
        log("Request completed", status_code=response.status_code)
        return response


def client_ip(request: Request) -> str:
    """Client address, preferring the first X-Forwarded-For hop."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"
