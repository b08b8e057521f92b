"""UserRepository protocol (port).

Persistence boundary for account records. Adapters translate their store's
failures into the typed exceptions in `gatekeeper.domain.errors`; anything
else they raise is treated as an internal failure.
"""

from typing import Any, Protocol

from gatekeeper.domain.entities import User


class UserRepository(Protocol):
    """Account record storage.

    Implementations:
        - InMemoryUserRepository: process-local store (default, tests)
    """

    async def find_by_unique_key(self, email: str) -> User | None:
        """Find a user by normalized email.

        Args:
            email: Trimmed, lower-cased email.

        Returns:
            User | None: The user, or None when absent.
        """
        ...

    async def find_by_id(self, user_id: str) -> User | None:
        """Find a user by id.

        Returns:
            User | None: The user, or None when absent.
        """
        ...

    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises:
            DuplicateKeyError: If the email is already taken.
            StorageValidationError: If write constraints are violated.
        """
        ...

    async def update_by_id(self, user_id: str, patch: dict[str, Any]) -> User:
        """Apply a partial update.

        Args:
            user_id: Target user id.
            patch: Entity attribute name -> new value.

        Returns:
            User: The updated user.

        Raises:
            RecordNotFoundError: If no user has this id.
            StorageValidationError: If write constraints are violated.
        """
        ...
