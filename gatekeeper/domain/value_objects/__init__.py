"""Domain value objects.

Usage:
    from gatekeeper.domain.value_objects import RateLimitPolicy, TokenPayload
"""

from gatekeeper.domain.value_objects.rate_limit_rule import (
    RateLimitPolicy,
    RateLimitResult,
)
from gatekeeper.domain.value_objects.token_payload import TokenPayload
from gatekeeper.domain.value_objects.validation_result import ValidationResult

__all__ = [
    "RateLimitPolicy",
    "RateLimitResult",
    "TokenPayload",
    "ValidationResult",
]
