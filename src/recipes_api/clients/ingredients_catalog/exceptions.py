"""Ingredients catalog client exceptions.

These exceptions are caught by the service layer and converted to the
matching API errors.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for ingredients catalog client errors."""


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog cannot be reached.

    This includes connection errors and timeouts.
    """


class CatalogTimeoutError(CatalogUnavailableError):
    """Raised when a request to the catalog times out."""


class CatalogResponseError(CatalogError):
    """Raised when the catalog answers with a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)
