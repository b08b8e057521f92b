"""API tests for /api/user/profile.

Tests cover:
- 401 without a token, with a garbage token and with an expired token
- Read and partial update via Bearer header and via session cookie
- Partial update validation (only supplied fields are checked)
- Account removed after token issuance (404)
"""

import asyncio

import pytest
from fastapi import status

PROFILE_URL = "/api/user/profile"


def register(client, email="ada@example.com") -> str:
    response = client.post(
        "/api/auth/register",
        json={
            "email": email,
            "password": "Secret123",
            "firstName": "Ada",
            "lastName": "Lovelace",
        },
    )
    client.cookies.clear()
    return response.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.api
class TestProfileAuthentication:
    def test_missing_token(self, client):
        response = client.get(PROFILE_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {
            "error": "Authentication token required",
            "code": "AUTHENTICATION",
            "statusCode": 401,
        }
        assert response.headers["X-RateLimit-Limit"] == "100"

    def test_garbage_token(self, client):
        response = client.get(PROFILE_URL, headers=bearer("garbage"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "Invalid or expired token"

    def test_expired_token(self, client, clock):
        token = register(client)
        clock.advance(days=7)

        response = client.get(PROFILE_URL, headers=bearer(token))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "Invalid or expired token"

    def test_account_removed_after_issuance(self, client, user_repository):
        token = register(client)
        asyncio.run(user_repository.clear())

        response = client.get(PROFILE_URL, headers=bearer(token))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "User not found"


@pytest.mark.api
class TestProfileRead:
    def test_read_with_bearer_token(self, client):
        token = register(client)

        response = client.get(PROFILE_URL, headers=bearer(token))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Profile retrieved successfully"
        assert data["user"]["email"] == "ada@example.com"
        assert "token" not in data

    def test_read_with_session_cookie(self, client):
        client.post(
            "/api/auth/register",
            json={
                "email": "ada@example.com",
                "password": "Secret123",
                "firstName": "Ada",
                "lastName": "Lovelace",
            },
        )

        response = client.get(PROFILE_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["firstName"] == "Ada"


@pytest.mark.api
class TestProfileUpdate:
    def test_partial_update(self, client, clock):
        token = register(client)
        clock.advance(minutes=5)

        response = client.put(
            PROFILE_URL,
            headers=bearer(token),
            json={"bio": "Analyst", "skills": [" math ", "engines"], "phone": "+1 555-0100"},
        )

        assert response.status_code == status.HTTP_200_OK
        user = response.json()["user"]
        assert user["bio"] == "Analyst"
        assert user["skills"] == ["math", "engines"]
        assert user["phone"] == "+1 555-0100"
        assert user["firstName"] == "Ada"
        assert user["updatedAt"] == "2024-05-01T12:05:00.000Z"

    def test_update_is_visible_on_read(self, client):
        token = register(client)
        client.put(PROFILE_URL, headers=bearer(token), json={"lastName": "Byron"})

        response = client.get(PROFILE_URL, headers=bearer(token))

        assert response.json()["user"]["lastName"] == "Byron"

    def test_only_supplied_fields_are_validated(self, client):
        token = register(client)

        response = client.put(
            PROFILE_URL,
            headers=bearer(token),
            json={"phone": "call me", "bio": "x" * 501},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"] == {
            "phone": ["Invalid phone number"],
            "bio": ["Bio cannot exceed 500 characters"],
        }

    def test_email_and_role_are_not_updatable(self, client):
        token = register(client)

        response = client.put(
            PROFILE_URL,
            headers=bearer(token),
            json={"email": "evil@example.com", "role": "admin"},
        )

        assert response.status_code == status.HTTP_200_OK
        user = response.json()["user"]
        assert user["email"] == "ada@example.com"
        assert user["role"] == "candidate"

    def test_update_requires_token(self, client):
        response = client.put(PROFILE_URL, json={"bio": "x"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
