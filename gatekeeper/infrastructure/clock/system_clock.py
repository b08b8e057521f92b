"""Wall-clock adapter for ClockProtocol."""

from datetime import UTC, datetime


class SystemClock:
    """Clock backed by the system's UTC wall clock."""

    def now(self) -> datetime:
        """Return the current aware UTC time."""
        return datetime.now(UTC)
