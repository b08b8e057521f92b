"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Adaptive cost factor (12 by default, ~250ms per hash)
    - Random salt per hash
    - bcrypt reads at most 72 bytes; longer inputs are truncated the same
      way on hash and on verify

Both calls are CPU-bound. Async callers run them with `asyncio.to_thread`.
"""

import bcrypt

_BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from gatekeeper.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123")
        is_valid = password_service.verify_password("SecurePass123", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12). Logarithmic:
                each +1 doubles computation time. Values below 10 are only
                suitable for tests.

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4..31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(_encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise (also for a
            malformed hash).
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
