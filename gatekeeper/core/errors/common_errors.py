"""Error variants, one per taxonomy kind.

Error Types:
- ValidationError: field-level input violations (all of them, not the first)
- AuthenticationError: missing, malformed, expired or forged credential
- AuthorizationError: valid identity without the required role
- NotFoundError: referenced entity absent
- ConflictError: uniqueness violation
- RateLimitedError: admission denied, carries the retry guidance
- InternalError: unanticipated failure; message is for logs only

Usage:
    from gatekeeper.core.errors import ValidationError
    from gatekeeper.core.result import Failure

    return Failure(error=ValidationError(
        message="Validation failed",
        field_errors={"email": ["Invalid email format"]},
    ))
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from gatekeeper.core.enums import ErrorKind
from gatekeeper.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        message: Human-readable message.
        field_errors: Dot-joined field path -> ordered violation messages.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION

    field_errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (no token, invalid or expired token, bad credentials)."""

    kind: ClassVar[ErrorKind] = ErrorKind.AUTHENTICATION


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (authenticated, but not allowed).

    Attributes:
        message: Human-readable message.
        required_roles: Roles that would have been accepted (log context only).
    """

    kind: ClassVar[ErrorKind] = ErrorKind.AUTHORIZATION

    required_roles: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        message: Human-readable message.
        resource_type: Type of resource (User, ...).
        resource_id: Identifier that was looked up (log context only).
    """

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND

    resource_type: str
    resource_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness violation.

    Attributes:
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field holding the duplicate value (email, ...).
    """

    kind: ClassVar[ErrorKind] = ErrorKind.CONFLICT

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitedError(DomainError):
    """Admission denied by the rate limiter.

    Attributes:
        message: Human-readable message.
        reset_at: When the current window closes; retry no earlier.
        limit: Requests allowed per window.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.RATE_LIMITED

    reset_at: datetime
    limit: int


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Unanticipated failure.

    The message is written to the log sink only; callers always see the
    generic INTERNAL message.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL
