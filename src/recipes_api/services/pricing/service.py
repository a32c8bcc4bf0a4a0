"""Ingredient pricing service.

Looks up cost-bearing catalog records by external id, remembering them in a
cache so repeated price queries do not hit the catalog.
"""

from __future__ import annotations

import asyncio
import time
from decimal import Decimal
from typing import TYPE_CHECKING

import orjson

from recipes_api.clients.ingredients_catalog.schemas import ExternalIngredient
from recipes_api.core.config import get_settings
from recipes_api.observability.logging import get_logger
from recipes_api.observability.metrics import PRICING_CACHE_LOOKUPS


if TYPE_CHECKING:
    from collections.abc import Sequence

    from redis.asyncio import Redis

    from recipes_api.clients.ingredients_catalog.client import (
        IngredientsCatalogClient,
    )
    from recipes_api.core.config import Settings

logger = get_logger(__name__)


class IngredientsPricingService:
    """Cached access to catalog ingredient records.

    Cache tiers:
    1. Redis, when a client is supplied
    2. An in-process dict guarded by an asyncio.Lock otherwise

    Cache failures are logged and treated as misses; catalog failures
    propagate to the caller.
    """

    def __init__(
        self,
        catalog_client: IngredientsCatalogClient,
        cache_client: Redis[str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the pricing service.

        Args:
            catalog_client: Client used for cache misses.
            cache_client: Redis client; the in-process cache is used when None.
            settings: Application settings.
        """
        settings = settings or get_settings()
        self._catalog = catalog_client
        self._cache = cache_client
        self._enabled = settings.pricing.cache_enabled
        self._ttl = settings.pricing.cache_ttl
        self._prefix = settings.pricing.cache_prefix
        self._local: dict[str, tuple[float | None, ExternalIngredient]] = {}
        self._local_lock = asyncio.Lock()

    @property
    def cache_backend(self) -> str:
        """Name of the active cache tier."""
        if not self._enabled:
            return "none"
        return "redis" if self._cache is not None else "memory"

    async def batch_get(self, ids: Sequence[str]) -> list[ExternalIngredient]:
        """Return catalog records for ``ids`` in request order.

        Each distinct id is looked up once; all misses are fetched with a
        single catalog call. Duplicate ids yield duplicate records. Ids the
        catalog does not know are left out.

        Raises:
            CatalogUnavailableError: If a miss cannot be fetched.
            CatalogResponseError: If the catalog rejects the lookup.
        """
        if not ids:
            return []

        distinct = list(dict.fromkeys(ids))
        found = await self._get_from_cache(distinct) if self._enabled else {}

        misses = [i for i in distinct if i not in found]
        PRICING_CACHE_LOOKUPS.labels(result="hit").inc(len(distinct) - len(misses))

        if misses:
            PRICING_CACHE_LOOKUPS.labels(result="miss").inc(len(misses))
            fetched = {r.id: r for r in await self._catalog.batch_get(misses)}
            found.update(fetched)
            if self._enabled and fetched:
                await self._cache_records(list(fetched.values()))

        unknown = [i for i in distinct if i not in found]
        if unknown:
            logger.warning("Catalog has no record for ingredients", ids=unknown)

        return [found[i] for i in ids if i in found]

    async def total_cost(self, ids: Sequence[str]) -> Decimal:
        """Sum the cost of every id in ``ids``, counting duplicates."""
        records = await self.batch_get(ids)
        return sum((r.cost for r in records), Decimal(0))

    async def _get_from_cache(self, ids: list[str]) -> dict[str, ExternalIngredient]:
        """Try to get records from the active cache tier."""
        if self._cache is None:
            return await self._get_from_local(ids)

        found: dict[str, ExternalIngredient] = {}
        try:
            values = await self._cache.mget([self._make_cache_key(i) for i in ids])
            for ingredient_id, data in zip(ids, values, strict=True):
                if data:
                    found[ingredient_id] = ExternalIngredient.model_validate(
                        orjson.loads(data)
                    )
        except Exception:
            logger.exception("Pricing cache lookup failed")
        return found

    async def _get_from_local(self, ids: list[str]) -> dict[str, ExternalIngredient]:
        now = time.monotonic()
        found: dict[str, ExternalIngredient] = {}
        async with self._local_lock:
            for ingredient_id in ids:
                entry = self._local.get(ingredient_id)
                if entry is None:
                    continue
                expires_at, record = entry
                if expires_at is not None and expires_at <= now:
                    del self._local[ingredient_id]
                    continue
                found[ingredient_id] = record
        return found

    async def _cache_records(self, records: list[ExternalIngredient]) -> None:
        """Store freshly fetched records in the active cache tier."""
        if self._cache is None:
            expires_at = time.monotonic() + self._ttl if self._ttl > 0 else None
            async with self._local_lock:
                for record in records:
                    self._local[record.id] = (expires_at, record)
            return

        try:
            async with self._cache.pipeline(transaction=False) as pipe:
                for record in records:
                    key = self._make_cache_key(record.id)
                    data = orjson.dumps(record.model_dump(mode="json"))
                    if self._ttl > 0:
                        pipe.setex(key, self._ttl, data)
                    else:
                        pipe.set(key, data)
                await pipe.execute()
            logger.debug("Cached ingredient records", count=len(records))
        except Exception:
            logger.exception("Pricing cache write failed")

    def _make_cache_key(self, ingredient_id: str) -> str:
        """Create cache key for an ingredient."""
        return f"{self._prefix}:{ingredient_id}"
