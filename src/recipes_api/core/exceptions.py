"""Application exceptions and exception handlers.

This module provides structured exception handling with:
- An exception hierarchy rooted at AppError, one subclass per HTTP outcome
- FastAPI exception handlers producing a single error response shape
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipes_api.observability.logging import get_logger
from recipes_api.schemas.base import APIResponse


if TYPE_CHECKING:
    from collections.abc import Iterable

    from fastapi import Request

    from recipes_api.validation import FieldError

logger = get_logger(__name__)


class ErrorDetail(APIResponse):
    """Structured error detail, one per offending field."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(APIResponse):
    """Structured error response."""

    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None


class AppError(Exception):
    """Base application exception.

    Every error that should reach the client as a structured response
    inherits from this class.
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        self.headers = headers
        super().__init__(message)


class FieldValidationError(AppError):
    """Payload failed field-level validation (422)."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        details = [
            ErrorDetail(code="VALIDATION_ERROR", message=e.message, field=e.field)
            for e in errors
        ]
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            error="VALIDATION_ERROR",
            message="Request validation failed",
            details=details,
        )


class NotFoundError(AppError):
    """Resource not found exception."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=f"{resource} with identifier '{identifier}' not found",
        )


class UnauthorizedError(AppError):
    """Caller is not allowed to act on the resource."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="UNAUTHORIZED",
            message=message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadGatewayError(AppError):
    """An upstream dependency answered with an error."""

    def __init__(self, error: str, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            error=error,
            message=message,
        )


class ServiceUnavailableError(AppError):
    """An upstream dependency could not be reached."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        error: str = "SERVICE_UNAVAILABLE",
    ) -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error=error,
            message=message,
        )


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    status_code: int,
    body: ErrorResponse,
    headers: dict[str, str] | None = None,
) -> ORJSONResponse:
    body.request_id = _get_request_id(request)
    return ORJSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> ORJSONResponse:
        """Handle application exceptions."""
        return _error_response(
            request,
            exc.status_code,
            ErrorResponse(error=exc.error, message=exc.message, details=exc.details),
            exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        """Handle Starlette HTTP exceptions (unknown routes, auth failures)."""
        return _error_response(
            request,
            exc.status_code,
            ErrorResponse(error="HTTP_ERROR", message=str(exc.detail)),
            getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Handle request-shape errors raised by FastAPI/Pydantic."""
        details = [
            ErrorDetail(
                code="VALIDATION_ERROR",
                message=error["msg"],
                field=".".join(str(loc) for loc in error["loc"] if loc != "body"),
            )
            for error in exc.errors()
        ]
        return _error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ErrorResponse(
                error="VALIDATION_ERROR",
                message="Request validation failed",
                details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        """Handle unexpected exceptions without leaking internals."""
        logger.opt(exception=exc).error("Unhandled exception")
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                error="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred",
            ),
        )
