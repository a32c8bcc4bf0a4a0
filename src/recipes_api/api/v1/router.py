"""API v1 router: read-only recipe access for older clients.

Mounted under ``api.v1_prefix`` (default ``/v1``).
"""

from __future__ import annotations

from fastapi import APIRouter

from recipes_api.api.v1.endpoints import recipes


router = APIRouter()

router.include_router(recipes.router)
