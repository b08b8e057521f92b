"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console)
- Clock (system UTC)
- Rate limiting (fixed window, in-memory)
- Token service (JWT HS256)
- Password hashing (bcrypt)
- User repository (in-memory)
- Error formatter

Settings-dependent singletons are made by `build_*` functions. The cached
`get_*` factories feed them `get_settings()`; `app_scoped_overrides`
feeds them explicit settings for `create_app(settings)`.

Adapters are imported inside the builders so the core package never
imports infrastructure at module load.

Usage:
    # Application code (direct use)
    limiter = get_rate_limiter()

    # Presentation layer (FastAPI Depends; overridable in tests)
    limiter: RateLimitProtocol = Depends(get_rate_limiter)

    # Outside Depends, honouring the app's overrides
    limiter = resolve(request.app, get_rate_limiter)
"""

from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

from gatekeeper.core.config import Settings, get_settings

if TYPE_CHECKING:
    from fastapi import FastAPI

    from gatekeeper.application.errors import ErrorFormatter
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

T = TypeVar("T")


def build_logger(settings: Settings) -> "LoggerProtocol":
    """Human-readable output in development, JSON everywhere else."""
    from gatekeeper.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(use_json=settings.uses_json_logs, level=settings.log_level)


def build_rate_limiter(
    settings: Settings, clock: "ClockProtocol"
) -> "RateLimitProtocol":
    """Fresh, empty counter table."""
    from gatekeeper.infrastructure.rate_limit import FixedWindowRateLimiter

    return FixedWindowRateLimiter(
        clock, sweep_interval=settings.rate_limit_sweep_interval
    )


def build_token_service(
    settings: Settings, clock: "ClockProtocol"
) -> "TokenServiceProtocol":
    """JWT service signing with the configured secret.

    Raises:
        ValueError: If the configured secret key is shorter than 32 bytes.
    """
    from gatekeeper.infrastructure.security import JWTService

    return JWTService(
        settings.secret_key,
        clock=clock,
        lifetime=settings.access_token_lifetime,
        cookie_name=settings.session_cookie_name,
    )


def build_password_service(settings: Settings) -> "PasswordHashingProtocol":
    from gatekeeper.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


def build_error_formatter(logger: "LoggerProtocol") -> "ErrorFormatter":
    from gatekeeper.application.errors import ErrorFormatter

    return ErrorFormatter(logger=logger)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped)."""
    return build_logger(get_settings())


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get clock singleton (app-scoped)."""
    from gatekeeper.infrastructure.clock import SystemClock

    return SystemClock()


@lru_cache()
def get_rate_limiter() -> "RateLimitProtocol":
    """Get rate limiter singleton (app-scoped).

    The counter table lives as long as the process. Tests get a fresh one
    via `get_rate_limiter.cache_clear()` or a dependency override.
    """
    return build_rate_limiter(get_settings(), get_clock())


@lru_cache()
def get_rate_limit_policies() -> "dict[RateLimitPolicyName, RateLimitPolicy]":
    """Get the policy table (fixed at process start)."""
    from gatekeeper.config.rate_limits import build_policies

    return build_policies(get_settings())


@lru_cache()
def get_token_service() -> "TokenServiceProtocol":
    """Get token service singleton (app-scoped)."""
    return build_token_service(get_settings(), get_clock())


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped)."""
    return build_password_service(get_settings())


@lru_cache()
def get_user_repository() -> "UserRepository":
    """Get user repository singleton (app-scoped)."""
    from gatekeeper.infrastructure.persistence import InMemoryUserRepository

    return InMemoryUserRepository()


@lru_cache()
def get_error_formatter() -> "ErrorFormatter":
    """Get error formatter singleton (app-scoped)."""
    return build_error_formatter(get_logger())


def app_scoped_overrides(
    settings: Settings,
) -> dict[Callable[..., Any], Callable[..., Any]]:
    """Build every settings-dependent singleton from explicit settings.

    Clock and repository do not depend on settings and stay shared.

    Args:
        settings: Settings passed to `create_app`.

    Returns:
        dict: Factory -> replacement, for `app.dependency_overrides`.
    """
    from gatekeeper.config.rate_limits import build_policies

    clock = get_clock()
    logger = build_logger(settings)
    rate_limiter = build_rate_limiter(settings, clock)
    policies = build_policies(settings)
    token_service = build_token_service(settings, clock)
    password_service = build_password_service(settings)
    formatter = build_error_formatter(logger)

    return {
        get_settings: lambda: settings,
        get_logger: lambda: logger,
        get_rate_limiter: lambda: rate_limiter,
        get_rate_limit_policies: lambda: policies,
        get_token_service: lambda: token_service,
        get_password_service: lambda: password_service,
        get_error_formatter: lambda: formatter,
    }


def resolve(app: "FastAPI", factory: Callable[[], T]) -> T:
    """Call `factory`, or the app's override for it.

    For code outside FastAPI's dependency injection (lifespan, exception
    handlers).
    """
    return app.dependency_overrides.get(factory, factory)()
