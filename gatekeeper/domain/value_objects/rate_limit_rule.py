"""Rate limit policy and decision value objects.

Fixed-window counting: each key may be observed `limit` times per window.
The window starts at the first observation and is replaced (not slid)
once it has elapsed.

Usage:
    from gatekeeper.domain.value_objects import RateLimitPolicy

    policy = RateLimitPolicy(limit=5, window_seconds=900)
    result = limiter.attempt("login:203.0.113.7", policy.limit, policy.window)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitPolicy:
    """Named admission budget (value object).

    Attributes:
        limit: Attempts allowed per window. Must be >= 1.
        window_seconds: Window length in seconds. Must be > 0.

    Example:
        # 5 attempts per 15 minutes (authentication endpoints)
        auth = RateLimitPolicy(limit=5, window_seconds=15 * 60)

    Raises:
        ValueError: If limit < 1 or window_seconds <= 0.
    """

    limit: int
    window_seconds: int

    def __post_init__(self) -> None:
        """Validate policy configuration after initialization.

        Raises:
            ValueError: If any numeric field is invalid.
        """
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
        if self.window_seconds <= 0:
            raise ValueError(
                f"window_seconds must be positive, got {self.window_seconds}"
            )

    @property
    def window(self) -> timedelta:
        """Window length as a timedelta."""
        return timedelta(seconds=self.window_seconds)


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitResult:
    """Outcome of one admission attempt.

    Denial is a value, not an exception. Every field feeds a response
    header (X-RateLimit-Limit, X-RateLimit-Remaining, X-RateLimit-Reset,
    Retry-After).

    Attributes:
        admitted: Whether the attempt was admitted.
        limit: Attempts allowed per window.
        remaining: Attempts left in the current window (never negative).
        reset_at: When the current window closes.
    """

    admitted: bool
    limit: int
    remaining: int
    reset_at: datetime

    def retry_after_seconds(self, now: datetime) -> int:
        """Whole seconds until the window closes, rounded up.

        Args:
            now: Current time (same clock the limiter uses).

        Returns:
            int: Seconds to wait, at least 1 while the window is open.
        """
        delta = (self.reset_at - now).total_seconds()
        if delta <= 0:
            return 0
        whole = int(delta)
        return whole if whole == delta else whole + 1
