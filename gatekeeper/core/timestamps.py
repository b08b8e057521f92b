"""Timestamp formatting for the wire.

All timestamps leave the service as ISO-8601 UTC with millisecond
precision and a `Z` suffix (e.g. `2024-05-01T12:15:00.000Z`).
"""

from datetime import UTC, datetime


def to_iso8601(moment: datetime) -> str:
    """Format an aware datetime as ISO-8601 UTC.

    Args:
        moment: Timezone-aware datetime.

    Returns:
        str: ISO-8601 string with `Z` suffix.

    Raises:
        ValueError: If `moment` is naive.

    Example:
        >>> to_iso8601(datetime(2024, 5, 1, 12, 15, tzinfo=UTC))
        '2024-05-01T12:15:00.000Z'
    """
    if moment.tzinfo is None:
        raise ValueError("Naive datetime cannot be formatted as UTC")
    return (
        moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    )
