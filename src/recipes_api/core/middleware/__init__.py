"""HTTP middleware components."""

from recipes_api.core.middleware.logging import LoggingMiddleware
from recipes_api.core.middleware.request_id import RequestIDMiddleware
from recipes_api.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
]
