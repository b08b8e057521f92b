"""Base error class for Railway-Oriented Programming.

DomainError is the base of the closed set of error variants. Each variant
pins its ErrorKind as a class attribute and adds the payload that kind
needs (field errors, reset time, resource type). They flow through the
system as data inside Failure results, not as exceptions.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        kind: ClassVar[ErrorKind] = ErrorKind.CONFLICT
"""

from dataclasses import dataclass
from typing import ClassVar

from gatekeeper.core.enums import ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        message: Human-readable message, safe to expose externally
            (except for InternalError, whose message is log-only).
    """

    kind: ClassVar[ErrorKind]

    message: str

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.kind.value}: {self.message}"
