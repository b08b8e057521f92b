"""Container module - centralized dependency injection.

Re-exports every factory:

    from gatekeeper.core.container import get_rate_limiter, get_request_pipeline

- infrastructure: app-scoped singletons (lru_cache)
- handlers: request-scoped pipeline and handlers (FastAPI Depends)
"""

from gatekeeper.core.container.handlers import (
    get_get_profile_handler,
    get_login_user_handler,
    get_register_user_handler,
    get_request_pipeline,
    get_update_profile_handler,
)
from gatekeeper.core.container.infrastructure import (
    app_scoped_overrides,
    get_clock,
    get_error_formatter,
    get_logger,
    get_password_service,
    get_rate_limit_policies,
    get_rate_limiter,
    get_token_service,
    get_user_repository,
    resolve,
)

__all__ = [
    "app_scoped_overrides",
    "get_clock",
    "get_error_formatter",
    "get_get_profile_handler",
    "get_logger",
    "get_login_user_handler",
    "get_password_service",
    "get_rate_limit_policies",
    "get_rate_limiter",
    "get_register_user_handler",
    "get_request_pipeline",
    "get_token_service",
    "get_update_profile_handler",
    "get_user_repository",
    "resolve",
]
