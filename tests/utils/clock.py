"""Manually advanced clock for deterministic window and expiry tests."""

from datetime import UTC, datetime, timedelta

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


class ManualClock:
    """ClockProtocol implementation that only moves when told to."""

    def __init__(self, start: datetime = T0) -> None:
        self._now = start

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta | None = None, **kwargs: float) -> datetime:
        """Move forward by `delta` (or timedelta(**kwargs)) and return the new time."""
        self._now += delta if delta is not None else timedelta(**kwargs)
        return self._now

    def set(self, moment: datetime) -> None:
        self._now = moment
