"""In-memory UserRepository adapter.

Process-local account store with the same contract a document store
adapter would honour: a unique index on email, typed storage exceptions,
and the entity's hard write constraints enforced on every write.

Stored entities are copied on the way in and out, so callers never hold a
reference into the store.
"""

import asyncio
from dataclasses import replace
from typing import Any

from gatekeeper.domain.entities import User
from gatekeeper.domain.entities.user import UPDATABLE_FIELDS
from gatekeeper.domain.errors import (
    DuplicateKeyError,
    RecordNotFoundError,
    StorageValidationError,
)

_COLLECTION = "users"


class InMemoryUserRepository:
    """Dictionary-backed user store.

    Usage:
        repository = InMemoryUserRepository()
        created = await repository.create(user)
        found = await repository.find_by_unique_key("user@example.com")
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._ids_by_email: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def find_by_unique_key(self, email: str) -> User | None:
        """Find a user by normalized email."""
        user_id = self._ids_by_email.get(email)
        if user_id is None:
            return None
        return _copy(self._users[user_id])

    async def find_by_id(self, user_id: str) -> User | None:
        """Find a user by id."""
        user = self._users.get(user_id)
        return _copy(user) if user is not None else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            DuplicateKeyError: If the email (or id) is already taken.
            StorageValidationError: If the entity violates write constraints.
        """
        _check_write_constraints(user)
        async with self._lock:
            if user.email in self._ids_by_email:
                raise DuplicateKeyError("email")
            if user.id in self._users:
                raise DuplicateKeyError("id")
            self._users[user.id] = _copy(user)
            self._ids_by_email[user.email] = user.id
        return _copy(user)

    async def update_by_id(self, user_id: str, patch: dict[str, Any]) -> User:
        """Apply a partial update to one user.

        Args:
            user_id: Target user id.
            patch: Entity attribute -> value. Only profile attributes and
                `updated_at` may be patched.

        Raises:
            RecordNotFoundError: If the user does not exist.
            StorageValidationError: If the patch names unknown attributes
                or the result violates write constraints.
        """
        unknown = sorted(set(patch) - UPDATABLE_FIELDS - {"updated_at"})
        if unknown:
            raise StorageValidationError(
                {name: ["Field cannot be updated"] for name in unknown}
            )
        async with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise RecordNotFoundError(_COLLECTION, user_id)
            updated = replace(current, **patch)
            _check_write_constraints(updated)
            self._users[user_id] = _copy(updated)
        return _copy(updated)

    async def clear(self) -> None:
        """Remove every record."""
        async with self._lock:
            self._users.clear()
            self._ids_by_email.clear()


def _check_write_constraints(user: User) -> None:
    violations = user.write_violations()
    if violations:
        raise StorageValidationError(violations)


def _copy(user: User) -> User:
    return replace(user, skills=list(user.skills))
