"""Ingredients catalog HTTP client.

This module provides an async HTTP client for the external ingredients
catalog: batch lookup of ingredient records and a reachability probe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn
from urllib.parse import urlsplit

import httpx
import orjson
from icmplib import async_ping
from pydantic import TypeAdapter, ValidationError

from recipes_api.clients.ingredients_catalog.exceptions import (
    CatalogResponseError,
    CatalogTimeoutError,
    CatalogUnavailableError,
)
from recipes_api.clients.ingredients_catalog.schemas import (
    BatchGetIngredientsRequest,
    ExternalIngredient,
)
from recipes_api.core.config import get_settings
from recipes_api.observability.logging import get_logger
from recipes_api.observability.metrics import CATALOG_REQUESTS


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipes_api.core.config import Settings


logger = get_logger(__name__)

_INGREDIENT_LIST = TypeAdapter(list[ExternalIngredient])


class IngredientsCatalogClient:
    """HTTP client for the ingredients catalog.

    Example:
        ```python
        client = IngredientsCatalogClient()
        await client.initialize()

        records = await client.batch_get(["ing-1", "ing-2"])

        await client.shutdown()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the client."""
        self._settings = settings or get_settings()
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        """Get the base URL of the catalog."""
        url = self._settings.catalog.base_url
        if not url:
            msg = "Ingredients catalog URL not configured"
            raise RuntimeError(msg)
        return url.rstrip("/")

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.catalog.timeout),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        logger.info("IngredientsCatalogClient initialized", base_url=self.base_url)

    async def shutdown(self) -> None:
        """Release resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("IngredientsCatalogClient shutdown")

    async def batch_get(self, ids: Sequence[str]) -> list[ExternalIngredient]:
        """Fetch catalog records for the given ingredient ids.

        An empty id list returns an empty list without touching the network.
        The catalog decides the order and multiplicity of the returned
        records; callers match them back by id.

        Args:
            ids: Catalog ingredient ids.

        Returns:
            The records the catalog returned.

        Raises:
            CatalogUnavailableError: If the catalog is unreachable.
            CatalogTimeoutError: If the request times out.
            CatalogResponseError: For non-success responses or malformed bodies.
        """
        if not ids:
            return []

        if not self._http_client:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        url = f"{self.base_url}{self._settings.catalog.batch_get_path}"
        payload = orjson.dumps(BatchGetIngredientsRequest(ids=list(ids)).model_dump())

        logger.debug("Fetching ingredients from catalog", url=url, count=len(ids))

        try:
            response = await self._http_client.post(url, content=payload)
        except httpx.TimeoutException as e:
            CATALOG_REQUESTS.labels(outcome="timeout").inc()
            logger.warning("Request to ingredients catalog timed out")
            raise CatalogTimeoutError(str(e)) from e
        except httpx.RequestError as e:
            CATALOG_REQUESTS.labels(outcome="unavailable").inc()
            logger.warning("Failed to connect to ingredients catalog", error=str(e))
            error_msg = f"Failed to connect to ingredients catalog: {e}"
            raise CatalogUnavailableError(error_msg) from e

        if not response.is_success:
            CATALOG_REQUESTS.labels(outcome="error").inc()
            self._raise_error_response(response)

        try:
            records = _INGREDIENT_LIST.validate_json(response.content)
        except ValidationError as e:
            CATALOG_REQUESTS.labels(outcome="error").inc()
            logger.warning("Ingredients catalog returned a malformed body")
            msg = "Malformed ingredients catalog response"
            raise CatalogResponseError(response.status_code, msg) from e

        CATALOG_REQUESTS.labels(outcome="success").inc()
        logger.debug("Ingredients fetched from catalog", count=len(records))
        return records

    async def is_healthy(self) -> bool:
        """Report whether the catalog host answers one ICMP echo.

        Returns:
            True if a reply was received; False on no reply or any error.
        """
        host = urlsplit(self.base_url).hostname
        if not host:
            return False

        try:
            result = await async_ping(
                host,
                count=1,
                timeout=self._settings.catalog.ping_timeout,
                privileged=False,
            )
        except Exception as e:  # noqa: BLE001
            logger.debug("Catalog ping failed", host=host, error=str(e))
            return False

        return bool(result.is_alive)

    def _raise_error_response(self, response: httpx.Response) -> NoReturn:
        """Translate an error response into CatalogResponseError."""
        status_code = response.status_code

        try:
            error_body = orjson.loads(response.content)
            message = str(error_body.get("message", "Unknown error"))
        except (orjson.JSONDecodeError, AttributeError):
            message = response.text or f"HTTP {status_code}"

        logger.warning(
            "Ingredients catalog returned error",
            status_code=status_code,
            message=message,
        )
        raise CatalogResponseError(status_code, message)
