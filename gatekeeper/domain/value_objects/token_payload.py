"""Decoded bearer token claims."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from gatekeeper.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPayload:
    """Identity carried by a verified token.

    Immutable; refreshing identity means issuing a new token.

    Attributes:
        subject_id: User id (`sub` claim).
        email: User email at issuance time.
        role: User role at issuance time.
        issued_at: `iat` claim.
        expires_at: `exp` claim.
    """

    subject_id: str
    email: str
    role: UserRole
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "TokenPayload":
        """Build from decoded JWT claims.

        Args:
            claims: Decoded claim set.

        Returns:
            TokenPayload: Typed payload.

        Raises:
            KeyError: If a required claim is missing.
            ValueError: If a claim has the wrong shape (unknown role, non-numeric time).
            TypeError: If a claim has the wrong type.
        """
        subject_id = claims["sub"]
        email = claims["email"]
        if not isinstance(subject_id, str) or not isinstance(email, str):
            raise TypeError("sub and email claims must be strings")
        return cls(
            subject_id=subject_id,
            email=email,
            role=UserRole(claims["role"]),
            issued_at=datetime.fromtimestamp(float(claims["iat"]), tz=UTC),
            expires_at=datetime.fromtimestamp(float(claims["exp"]), tz=UTC),
        )
