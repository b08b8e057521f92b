"""System router for unversioned application endpoints."""

from fastapi import APIRouter, Depends

from gatekeeper.core.config import Settings, get_settings

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status and application version.
    """
    return {"status": "healthy", "version": settings.app_version}
