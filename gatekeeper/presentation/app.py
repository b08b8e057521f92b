"""FastAPI application factory.

Builds the app with trace middleware, exception handlers and routers.
Collaborators come from the container through FastAPI Depends, so tests
swap them with `app.dependency_overrides`.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.container import (
    app_scoped_overrides,
    get_logger,
    get_rate_limiter,
    resolve,
)
from gatekeeper.presentation.routers import api_router, system_router
from gatekeeper.presentation.routers.api.errors import register_exception_handlers
from gatekeeper.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    Shutdown drops every rate-limit counter.
    """
    settings: Settings = app.state.settings
    logger = resolve(app, get_logger)
    logger.info(
        "Application starting",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    resolve(app, get_rate_limiter).clear()
    logger.info("Application stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to use; defaults to `get_settings()`. Explicit
            settings also replace every settings-dependent singleton
            (logger, limiter, policies, token and password services,
            formatter) through dependency overrides.

    Returns:
        FastAPI: Configured application.
    """
    resolved = settings or get_settings()

    app = FastAPI(
        title=resolved.app_name,
        description="Account service with rate limiting, token auth and validation",
        version=resolved.app_version,
        debug=resolved.debug,
        lifespan=lifespan,
    )
    app.state.settings = resolved
    if settings is not None:
        app.dependency_overrides.update(app_scoped_overrides(settings))

    # Wire trace middleware (request correlation)
    app.add_middleware(TraceMiddleware)

    # Every failure leaves in the same envelope
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(api_router, prefix=resolved.api_prefix)

    return app
