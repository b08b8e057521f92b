"""Profile endpoints (authenticated).

Endpoints:
    GET /user/profile - read own profile
    PUT /user/profile - partially update own profile
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gatekeeper.application.commands.handlers import (
    GetProfileHandler,
    UpdateProfileHandler,
)
from gatekeeper.application.pipeline import OperationName, RequestPipeline
from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.container import (
    get_get_profile_handler,
    get_request_pipeline,
    get_update_profile_handler,
)
from gatekeeper.presentation.routers.api.dispatch import run_operation

users_router = APIRouter(prefix="/user", tags=["Users"])


@users_router.get("/profile")
async def get_profile(
    request: Request,
    pipeline: RequestPipeline = Depends(get_request_pipeline),
    handler: GetProfileHandler = Depends(get_get_profile_handler),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return the caller's profile (200, 401, 404, 429)."""
    return await run_operation(
        request,
        OperationName.PROFILE_READ,
        pipeline=pipeline,
        execute=handler.execute,
        settings=settings,
    )


@users_router.put("/profile")
async def update_profile(
    request: Request,
    pipeline: RequestPipeline = Depends(get_request_pipeline),
    handler: UpdateProfileHandler = Depends(get_update_profile_handler),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Apply a partial profile update (200, 400, 401, 404, 429).

    Body: any subset of `{firstName, lastName, phone, bio, skills, experience}`.
    """
    return await run_operation(
        request,
        OperationName.PROFILE_UPDATE,
        pipeline=pipeline,
        execute=handler.execute,
        settings=settings,
    )
