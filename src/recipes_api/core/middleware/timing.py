"""Request duration middleware.

Reports the handling time of each request in a response header and warns
about requests slower than a threshold.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

# Seconds
SLOW_REQUEST_THRESHOLD = 1.0


class TimingMiddleware(BaseHTTPMiddleware):
    """Measure how long each request takes."""

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Process-Time",
        slow_threshold: float = SLOW_REQUEST_THRESHOLD,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.slow_threshold = slow_threshold

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        elapsed_ms = round(elapsed * 1000, 2)
        response.headers[self.header_name] = f"{elapsed_ms}ms"

        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request",
                method=request.method,
                path=request.url.path,
                duration_ms=elapsed_ms,
            )

        return response
