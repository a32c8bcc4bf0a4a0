"""API v2 router aggregating all endpoint routers.

Mounted under ``api.v2_prefix`` (default ``/v2``).
"""

from __future__ import annotations

from fastapi import APIRouter

from recipes_api.api.v2.endpoints import auth, groups, recipes


router = APIRouter()

router.include_router(recipes.router)
router.include_router(groups.router)
router.include_router(auth.router)
