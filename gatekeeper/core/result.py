"""Result types for railway-oriented programming.

Operations that can fail in an expected way (bad input, missing token,
duplicate email) return a Result instead of raising. Exceptions are kept
for programming errors and for failures nobody anticipated.

Usage:
    def verify(token: str) -> Result[TokenPayload, AuthenticationError]:
        if not token:
            return Failure(error=AuthenticationError(message="Invalid token"))
        return Success(value=payload)

    match verify(token):
        case Success(value=payload):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
