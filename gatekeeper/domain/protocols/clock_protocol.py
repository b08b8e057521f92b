"""Clock protocol (port).

Rate-limit windows and token expiry are computed against an injected clock
so that tests control time explicitly.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time.

    Implementations:
        - SystemClock: wall clock (production)
        - ManualClock: manually advanced (tests)
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
