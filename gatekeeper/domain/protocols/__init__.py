"""Domain protocols (ports).

Structural interfaces implemented by infrastructure adapters.

Usage:
    from gatekeeper.domain.protocols import RateLimitProtocol, UserRepository
"""

from gatekeeper.domain.protocols.clock_protocol import ClockProtocol
from gatekeeper.domain.protocols.logger_protocol import LoggerProtocol
from gatekeeper.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from gatekeeper.domain.protocols.rate_limit_protocol import RateLimitProtocol
from gatekeeper.domain.protocols.token_service_protocol import TokenServiceProtocol
from gatekeeper.domain.protocols.user_repository import UserRepository

__all__ = [
    "ClockProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RateLimitProtocol",
    "TokenServiceProtocol",
    "UserRepository",
]
