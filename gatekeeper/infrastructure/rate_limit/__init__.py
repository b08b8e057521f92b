"""Rate limiting adapters."""

from gatekeeper.infrastructure.rate_limit.fixed_window_limiter import (
    FixedWindowRateLimiter,
)

__all__ = ["FixedWindowRateLimiter"]
