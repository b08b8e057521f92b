"""Fixed-window rate limiter (adapter).

Implements RateLimitProtocol with a process-local counter table.

Algorithm:
    - First attempt on a key (or first attempt after its window closed)
      opens a fresh window: count = 1, reset_at = now + window.
    - Every later attempt increments the count, admitted or not.
    - Admitted iff count <= limit; remaining = max(0, limit - count).

Concurrency:
    One lock guards the table for the read-modify-write of a single counter
    and for the occasional sweep. Nothing else runs under the lock, so it is
    safe from the event loop and from the framework's worker threads alike.

Memory:
    Expired counters are swept lazily from inside `attempt`, at most once
    per sweep interval. There is no background timer.

Single-process only: counters are not shared between workers or hosts.
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta

from gatekeeper.domain.protocols import ClockProtocol
from gatekeeper.domain.value_objects import RateLimitResult


@dataclass(slots=True)
class _CounterWindow:
    count: int
    reset_at: datetime


class FixedWindowRateLimiter:
    """In-memory fixed-window rate limiter.

    Usage:
        limiter = FixedWindowRateLimiter(clock=SystemClock())
        result = limiter.attempt("login:203.0.113.7", 5, timedelta(minutes=15))
        if not result.admitted:
            ...
    """

    def __init__(
        self,
        clock: ClockProtocol,
        *,
        sweep_interval: timedelta = timedelta(seconds=60),
    ) -> None:
        """Initialize the limiter with an empty counter table.

        Args:
            clock: Time source for window arithmetic.
            sweep_interval: Minimum time between sweeps of expired counters.
        """
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._counters: dict[str, _CounterWindow] = {}
        self._lock = threading.Lock()
        self._next_sweep_at: datetime | None = None

    def attempt(self, key: str, limit: int, window: timedelta) -> RateLimitResult:
        """Record one attempt and decide admission.

        Args:
            key: Counter key. Must be non-empty.
            limit: Attempts allowed per window (>= 1).
            window: Window length (> 0).

        Returns:
            RateLimitResult: Decision with limit, remaining and reset time.

        Raises:
            ValueError: On empty key, limit < 1 or non-positive window.

        Example:
            >>> result = limiter.attempt("login:203.0.113.7", 5, timedelta(minutes=15))
            >>> result.admitted, result.remaining
            (True, 4)
        """
        if not key:
            raise ValueError("Rate limit key must be a non-empty string")
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        if window <= timedelta(0):
            raise ValueError(f"window must be positive, got {window}")

        with self._lock:
            now = self._clock.now()
            self._sweep_if_due(now)
            counter = self._counters.get(key)
            if counter is None or now >= counter.reset_at:
                counter = _CounterWindow(count=0, reset_at=now + window)
                self._counters[key] = counter
            counter.count += 1
            count = counter.count
            reset_at = counter.reset_at

        return RateLimitResult(
            admitted=count <= limit,
            limit=limit,
            remaining=max(0, limit - count),
            reset_at=reset_at,
        )

    def reset(self, key: str) -> None:
        """Drop the counter for one key."""
        with self._lock:
            self._counters.pop(key, None)

    def clear(self) -> None:
        """Drop every counter."""
        with self._lock:
            self._counters.clear()
            self._next_sweep_at = None

    def __len__(self) -> int:
        """Number of live counters (expired ones count until swept)."""
        with self._lock:
            return len(self._counters)

    def _sweep_if_due(self, now: datetime) -> None:
        # Caller holds the lock
        if self._next_sweep_at is not None and now < self._next_sweep_at:
            return
        expired = [key for key, c in self._counters.items() if c.reset_at <= now]
        for key in expired:
            del self._counters[key]
        self._next_sweep_at = now + self._sweep_interval
