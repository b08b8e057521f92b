"""Clock adapters."""

from gatekeeper.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]
