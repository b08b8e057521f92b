"""Password hashing port.

Registration hashes, login verifies. The default adapter is
BcryptPasswordService; tests use a cheap reversible double.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Slow one-way password primitive.

    Both calls are CPU-bound. Handlers on the event loop run them with
    `asyncio.to_thread`.
    """

    def hash_password(self, password: str) -> str:
        """Return a salted one-way hash of `password`."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check `password` against a stored hash.

        Returns:
            bool: False on mismatch and on a malformed stored hash; never
            raises for either.
        """
        ...
