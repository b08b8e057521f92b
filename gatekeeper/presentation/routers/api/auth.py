"""Authentication endpoints.

Endpoints:
    POST /auth/register - create an account, start a session (201)
    POST /auth/login    - verify credentials, start a session (200)

Both are public (no token required) and share the AUTH rate-limit policy.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from gatekeeper.application.commands.handlers import (
    LoginUserHandler,
    RegisterUserHandler,
)
from gatekeeper.application.pipeline import OperationName, RequestPipeline
from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.container import (
    get_login_user_handler,
    get_register_user_handler,
    get_request_pipeline,
)
from gatekeeper.presentation.routers.api.dispatch import run_operation

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: Request,
    pipeline: RequestPipeline = Depends(get_request_pipeline),
    handler: RegisterUserHandler = Depends(get_register_user_handler),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Register a new account.

    Body: `{email, password, firstName, lastName, role?}`.

    Returns:
        201 `{message, user, token}` plus the session cookie, or an error
        envelope (400, 409, 429).
    """
    return await run_operation(
        request,
        OperationName.REGISTER,
        pipeline=pipeline,
        execute=handler.execute,
        settings=settings,
    )


@auth_router.post("/login")
async def login(
    request: Request,
    pipeline: RequestPipeline = Depends(get_request_pipeline),
    handler: LoginUserHandler = Depends(get_login_user_handler),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Log in with email and password.

    Returns:
        200 `{message, user, token}` plus the session cookie, or an error
        envelope (400, 401, 429).
    """
    return await run_operation(
        request,
        OperationName.LOGIN,
        pipeline=pipeline,
        execute=handler.execute,
        settings=settings,
    )
