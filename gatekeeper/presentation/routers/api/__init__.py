"""API routers.

Aggregates the resource routers under one router mounted at the API
prefix (`/api` by default).
"""

from fastapi import APIRouter

from gatekeeper.presentation.routers.api.auth import auth_router
from gatekeeper.presentation.routers.api.users import users_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)

__all__ = ["api_router"]
