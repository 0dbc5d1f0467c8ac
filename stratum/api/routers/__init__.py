"""Versioned resource routers mounted under ``/api/v1``."""

from fastapi import APIRouter

from stratum.api.constants import API_V1_PREFIX
from stratum.api.routers.items import router as items_router
from stratum.api.routers.users import router as users_router

api_router = APIRouter(prefix=API_V1_PREFIX)
api_router.include_router(users_router)
api_router.include_router(items_router)

__all__ = ["api_router"]
