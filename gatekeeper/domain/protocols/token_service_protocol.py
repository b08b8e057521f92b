"""Token service protocol (port).

Issues and verifies the signed, expiring bearer credential that carries a
user's identity between requests.

Usage:
    token = token_service.issue(subject_id=user.id, email=user.email, role=user.role)

    match token_service.verify(token):
        case Success(value=payload):
            user_id = payload.subject_id
        case Failure(error=error):
            ...
"""

from collections.abc import Mapping
from typing import Protocol

from gatekeeper.core.errors import AuthenticationError
from gatekeeper.core.result import Result
from gatekeeper.domain.enums import UserRole
from gatekeeper.domain.value_objects import TokenPayload


class TokenServiceProtocol(Protocol):
    """Bearer credential issuance and verification."""

    def issue(self, *, subject_id: str, email: str, role: UserRole) -> str:
        """Issue a signed token expiring after the configured lifetime.

        Args:
            subject_id: User id.
            email: User email.
            role: User role.

        Returns:
            str: Encoded token.
        """
        ...

    def verify(self, token: str) -> Result[TokenPayload, AuthenticationError]:
        """Verify signature, shape and expiry.

        Never raises. Expired, forged and malformed tokens produce the
        same failure value.

        Args:
            token: Encoded token.

        Returns:
            Result[TokenPayload, AuthenticationError]: Decoded payload or failure.
        """
        ...

    def extract_from_request(
        self, headers: Mapping[str, str], cookies: Mapping[str, str]
    ) -> str | None:
        """Find the credential on a request.

        Prefers `Authorization: Bearer <token>`, falls back to the session
        cookie.

        Args:
            headers: Request headers (name lookup is case-insensitive).
            cookies: Request cookies.

        Returns:
            str | None: Raw token, or None when absent.
        """
        ...
