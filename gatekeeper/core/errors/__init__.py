"""Core errors package.

One error variant per taxonomy kind. Variants are values carried in
Failure results, never raised.

Usage:
    from gatekeeper.core.errors import ValidationError, NotFoundError
"""

from gatekeeper.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from gatekeeper.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "InternalError",
]
