"""Request correlation middleware.

Every request carries an id: the caller's X-Request-ID when it sends a
usable one, a fresh UUID otherwise. The id is stored on ``request.state``,
bound to the logging context and echoed in the response headers.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipes_api.observability.logging import bind_context, clear_context


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

MAX_REQUEST_ID_LENGTH = 128


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id to each request and response."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        clear_context()

        incoming = request.headers.get(self.header_name, "").strip()
        if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
            request_id = incoming
        else:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id
        bind_context(request_id=request_id)

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
