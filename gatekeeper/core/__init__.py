"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- The closed error taxonomy (ErrorKind) and one error variant per kind
- Settings and the dependency container

The core module has NO dependencies on other application layers.
"""

from gatekeeper.core.enums import ErrorKind
from gatekeeper.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from gatekeeper.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "Failure",
    "InternalError",
    "NotFoundError",
    "RateLimitedError",
    "Result",
    "Success",
    "ValidationError",
]
