"""Request-scoped pipeline and handler factories.

Built per request from the app-scoped singletons through FastAPI Depends,
so tests can override any single collaborator (clock, repository,
limiter) with `app.dependency_overrides`.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from gatekeeper.core.container.infrastructure import (
    get_clock,
    get_error_formatter,
    get_logger,
    get_password_service,
    get_rate_limit_policies,
    get_rate_limiter,
    get_token_service,
    get_user_repository,
)

if TYPE_CHECKING:
    from gatekeeper.application.commands.handlers import (
        GetProfileHandler,
        LoginUserHandler,
        RegisterUserHandler,
        UpdateProfileHandler,
    )
    from gatekeeper.application.errors import ErrorFormatter
    from gatekeeper.application.pipeline import RequestPipeline
    from gatekeeper.config.rate_limits import RateLimitPolicyName
    from gatekeeper.domain.protocols import (
        ClockProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        RateLimitProtocol,
        TokenServiceProtocol,
        UserRepository,
    )
    from gatekeeper.domain.value_objects import RateLimitPolicy


def get_request_pipeline(
    rate_limiter: "RateLimitProtocol" = Depends(get_rate_limiter),
    token_service: "TokenServiceProtocol" = Depends(get_token_service),
    formatter: "ErrorFormatter" = Depends(get_error_formatter),
    policies: "dict[RateLimitPolicyName, RateLimitPolicy]" = Depends(
        get_rate_limit_policies
    ),
    clock: "ClockProtocol" = Depends(get_clock),
    logger: "LoggerProtocol" = Depends(get_logger),
) -> "RequestPipeline":
    """Get request pipeline (request-scoped)."""
    from gatekeeper.application.pipeline import RequestPipeline

    return RequestPipeline(
        rate_limiter=rate_limiter,
        token_service=token_service,
        formatter=formatter,
        policies=policies,
        clock=clock,
        logger=logger,
    )


def get_register_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    password_service: "PasswordHashingProtocol" = Depends(get_password_service),
    token_service: "TokenServiceProtocol" = Depends(get_token_service),
    clock: "ClockProtocol" = Depends(get_clock),
    logger: "LoggerProtocol" = Depends(get_logger),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped)."""
    from gatekeeper.application.commands.handlers import RegisterUserHandler

    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        clock=clock,
        logger=logger,
    )


def get_login_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    password_service: "PasswordHashingProtocol" = Depends(get_password_service),
    token_service: "TokenServiceProtocol" = Depends(get_token_service),
    logger: "LoggerProtocol" = Depends(get_logger),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from gatekeeper.application.commands.handlers import LoginUserHandler

    return LoginUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        logger=logger,
    )


def get_get_profile_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "GetProfileHandler":
    """Get GetProfile handler (request-scoped)."""
    from gatekeeper.application.commands.handlers import GetProfileHandler

    return GetProfileHandler(user_repo=user_repo)


def get_update_profile_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    clock: "ClockProtocol" = Depends(get_clock),
    logger: "LoggerProtocol" = Depends(get_logger),
) -> "UpdateProfileHandler":
    """Get UpdateProfile command handler (request-scoped)."""
    from gatekeeper.application.commands.handlers import UpdateProfileHandler

    return UpdateProfileHandler(user_repo=user_repo, clock=clock, logger=logger)
