"""Integration tests for InMemoryUserRepository.

Tests cover:
- Create and lookup by email / id
- Unique email index (DuplicateKeyError)
- Partial updates and the updatable-field allowlist
- Write constraints enforced on create and update
- Callers never hold references into the store
"""

import asyncio
from datetime import timedelta

import pytest

from gatekeeper.domain.entities import User
from gatekeeper.domain.enums import UserRole
from gatekeeper.domain.errors import (
    DuplicateKeyError,
    RecordNotFoundError,
    StorageValidationError,
)
from tests.utils.clock import T0


def make_user(**overrides) -> User:
    fields = {
        "id": "user-1",
        "email": "ada@example.com",
        "password_hash": "plain$Secret123",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "role": UserRole.CANDIDATE,
        "created_at": T0,
        "updated_at": T0,
        **overrides,
    }
    return User(**fields)


@pytest.mark.integration
class TestUserRepositoryCreate:
    async def test_create_then_find(self, user_repository):
        await user_repository.create(make_user())

        by_email = await user_repository.find_by_unique_key("ada@example.com")
        by_id = await user_repository.find_by_id("user-1")

        assert by_email == by_id
        assert by_email.first_name == "Ada"

    async def test_find_missing_returns_none(self, user_repository):
        assert await user_repository.find_by_unique_key("nobody@example.com") is None
        assert await user_repository.find_by_id("missing") is None

    async def test_duplicate_email(self, user_repository):
        await user_repository.create(make_user())

        with pytest.raises(DuplicateKeyError) as exc_info:
            await user_repository.create(make_user(id="user-2"))

        assert exc_info.value.field == "email"

    async def test_duplicate_id(self, user_repository):
        await user_repository.create(make_user())

        with pytest.raises(DuplicateKeyError) as exc_info:
            await user_repository.create(make_user(email="grace@example.com"))

        assert exc_info.value.field == "id"

    async def test_concurrent_creates_with_same_email(self, user_repository):
        results = await asyncio.gather(
            *(
                user_repository.create(make_user(id=f"user-{n}"))
                for n in range(5)
            ),
            return_exceptions=True,
        )

        created = [r for r in results if isinstance(r, User)]
        duplicates = [r for r in results if isinstance(r, DuplicateKeyError)]
        assert len(created) == 1
        assert len(duplicates) == 4

    async def test_create_enforces_write_constraints(self, user_repository):
        with pytest.raises(StorageValidationError) as exc_info:
            await user_repository.create(make_user(bio="x" * 501))

        assert exc_info.value.field_errors == {
            "bio": ["Bio cannot exceed 500 characters"]
        }
        assert await user_repository.find_by_id("user-1") is None


@pytest.mark.integration
class TestUserRepositoryUpdate:
    async def test_partial_update(self, user_repository):
        await user_repository.create(make_user())
        later = T0 + timedelta(hours=1)

        updated = await user_repository.update_by_id(
            "user-1", {"bio": "Analyst", "updated_at": later}
        )

        assert updated.bio == "Analyst"
        assert updated.first_name == "Ada"
        assert updated.updated_at == later
        assert (await user_repository.find_by_id("user-1")).bio == "Analyst"

    async def test_update_missing_record(self, user_repository):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await user_repository.update_by_id("missing", {"bio": "x"})

        assert exc_info.value.collection == "users"

    @pytest.mark.parametrize("field", ["email", "role", "password_hash", "id"])
    async def test_protected_fields_cannot_be_patched(self, user_repository, field):
        await user_repository.create(make_user())

        with pytest.raises(StorageValidationError) as exc_info:
            await user_repository.update_by_id("user-1", {field: "changed"})

        assert field in exc_info.value.field_errors

    async def test_update_enforces_write_constraints(self, user_repository):
        await user_repository.create(make_user())

        with pytest.raises(StorageValidationError):
            await user_repository.update_by_id("user-1", {"last_name": "L" * 51})

        assert (await user_repository.find_by_id("user-1")).last_name == "Lovelace"


@pytest.mark.integration
class TestUserRepositoryIsolation:
    async def test_returned_entities_are_copies(self, user_repository):
        await user_repository.create(make_user(skills=["math"]))

        found = await user_repository.find_by_id("user-1")
        found.skills.append("poetry")
        found.first_name = "Changed"

        again = await user_repository.find_by_id("user-1")
        assert again.skills == ["math"]
        assert again.first_name == "Ada"

    async def test_clear(self, user_repository):
        await user_repository.create(make_user())

        await user_repository.clear()

        assert await user_repository.find_by_unique_key("ada@example.com") is None
