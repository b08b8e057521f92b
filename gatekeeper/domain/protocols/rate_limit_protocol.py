"""Rate limit protocol (port) for fixed-window admission control.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides ADAPTERS (FixedWindowRateLimiter)
- The request pipeline uses the protocol (doesn't know about the adapter)

Usage:
    from gatekeeper.domain.protocols import RateLimitProtocol

    result = rate_limiter.attempt("login:203.0.113.7", 5, timedelta(minutes=15))
    if not result.admitted:
        ...
"""

from datetime import timedelta
from typing import Protocol

from gatekeeper.domain.value_objects import RateLimitResult


class RateLimitProtocol(Protocol):
    """Per-key admission counting.

    Denial is a return value. Implementations raise only for programming
    errors (empty key, non-positive limit or window).
    """

    def attempt(self, key: str, limit: int, window: timedelta) -> RateLimitResult:
        """Record one attempt for `key` and decide admission.

        Args:
            key: Counter key, e.g. "login:203.0.113.7". Must be non-empty.
            limit: Attempts allowed per window (>= 1).
            window: Window length (> 0).

        Returns:
            RateLimitResult: Decision plus header metadata.

        Raises:
            ValueError: On empty key, limit < 1 or non-positive window.
        """
        ...

    def reset(self, key: str) -> None:
        """Drop the counter for one key (no-op if absent)."""
        ...

    def clear(self) -> None:
        """Drop all counters (shutdown, test isolation)."""
        ...
