"""JWT token service (adapter).

Implements TokenServiceProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token
    - Expired, forged and malformed tokens all fail with the same error
      value, so callers cannot tell signature failures from expiry

Expiry is checked against the injected clock rather than PyJWT's own
`time.time()` check, so tests can move time without patching.
"""

from collections.abc import Mapping
from datetime import timedelta

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from gatekeeper.core.errors import AuthenticationError
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.domain.enums import UserRole
from gatekeeper.domain.protocols import ClockProtocol
from gatekeeper.domain.value_objects import TokenPayload

INVALID_TOKEN_MESSAGE = "Invalid or expired token"
_REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp"]


class JWTService:
    """JWT token issuance and verification service.

    Usage:
        from gatekeeper.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.issue(
            subject_id=user.id, email=user.email, role=user.role
        )
        result = token_service.verify(token)
    """

    def __init__(
        self,
        secret_key: str,
        *,
        clock: ClockProtocol,
        lifetime: timedelta = timedelta(days=7),
        cookie_name: str = "token",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes) for security.
            clock: Time source for `iat`, `exp` and expiry checks.
            lifetime: Token lifetime (default: 7 days).
            cookie_name: Session cookie consulted by `extract_from_request`.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes) or lifetime
                is not positive.
        """
        if len(secret_key.encode("utf-8")) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if lifetime <= timedelta(0):
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._clock = clock
        self._lifetime = lifetime
        self._cookie_name = cookie_name
        self._algorithm = "HS256"  # HMAC-SHA256

    @property
    def lifetime(self) -> timedelta:
        """Configured token lifetime."""
        return self._lifetime

    def issue(self, *, subject_id: str, email: str, role: UserRole) -> str:
        """Issue a signed JWT.

        Args:
            subject_id: User's unique identifier.
            email: User's email address.
            role: User's role.

        Returns:
            JWT string (header.payload.signature).

        Example:
            >>> service = JWTService("x" * 32, clock=SystemClock())
            >>> token = service.issue(
            ...     subject_id="0190c1d2-...", email="user@example.com",
            ...     role=UserRole.CANDIDATE,
            ... )
            >>> len(token.split("."))
            3
        """
        now = self._clock.now()
        expires_at = now + self._lifetime

        payload = {
            "sub": subject_id,
            "email": email,
            "role": UserRole(role).value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def verify(self, token: str) -> Result[TokenPayload, AuthenticationError]:
        """Verify a JWT and decode its payload.

        Args:
            token: JWT string.

        Returns:
            Success(TokenPayload) if the signature verifies, the claims have
            the expected shape and the token has not expired; otherwise
            Failure(AuthenticationError) with one fixed message.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": _REQUIRED_CLAIMS,
                },
            )
            payload = TokenPayload.from_claims(claims)
        except (InvalidTokenError, KeyError, TypeError, ValueError, OverflowError):
            return Failure(error=AuthenticationError(message=INVALID_TOKEN_MESSAGE))

        if self._clock.now() >= payload.expires_at:
            return Failure(error=AuthenticationError(message=INVALID_TOKEN_MESSAGE))
        return Success(value=payload)

    def extract_from_request(
        self, headers: Mapping[str, str], cookies: Mapping[str, str]
    ) -> str | None:
        """Find the bearer token on a request.

        Args:
            headers: Request headers; name matching is case-insensitive.
            cookies: Request cookies.

        Returns:
            Token from `Authorization: Bearer <token>`, else the session
            cookie value, else None.
        """
        authorization = _header(headers, "authorization")
        if authorization:
            scheme, _, credentials = authorization.strip().partition(" ")
            if scheme.lower() == "bearer" and credentials.strip():
                return credentials.strip()

        cookie_token = cookies.get(self._cookie_name)
        return cookie_token or None


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None
