"""API tests for /api/auth endpoints.

Tests cover:
- Registration: 201, session cookie attributes, public user shape
- Duplicate email (409) and validation errors (400, every field)
- Login success and indistinguishable credential failures (401)
- AUTH rate limit: sixth attempt is 429 with headers and Retry-After
"""

import pytest
from fastapi import status

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


def registration(**overrides):
    return {
        "email": "ada@example.com",
        "password": "Secret123",
        "firstName": "Ada",
        "lastName": "Lovelace",
        **overrides,
    }


@pytest.mark.api
class TestRegister:
    def test_register_creates_account(self, client):
        # Act
        response = client.post(REGISTER_URL, json=registration(email=" ADA@Example.com "))

        # Assert
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["message"] == "Registration successful"
        assert data["user"]["email"] == "ada@example.com"
        assert data["user"]["role"] == "candidate"
        assert data["user"]["skills"] == []
        assert "password" not in data["user"]
        assert "passwordHash" not in data["user"]
        assert data["token"].count(".") == 2

    def test_register_sets_session_cookie(self, client):
        response = client.post(REGISTER_URL, json=registration())

        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"token={response.json()['token']}")
        assert "HttpOnly" in cookie
        assert "Max-Age=604800" in cookie
        assert "Path=/" in cookie
        assert "samesite=lax" in cookie.lower()
        assert "Secure" not in cookie

    def test_register_as_recruiter(self, client):
        response = client.post(REGISTER_URL, json=registration(role="recruiter"))

        assert response.json()["user"]["role"] == "recruiter"

    def test_admin_role_cannot_be_self_assigned(self, client):
        response = client.post(REGISTER_URL, json=registration(role="admin"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"]["role"] == [
            "Role must be one of: candidate, recruiter"
        ]

    def test_duplicate_email_is_conflict(self, client):
        client.post(REGISTER_URL, json=registration())

        response = client.post(REGISTER_URL, json=registration(email="ADA@example.com"))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {
            "error": "User with this email already exists",
            "code": "CONFLICT",
            "statusCode": 409,
        }
        assert "set-cookie" not in response.headers

    def test_invalid_input_reports_every_field(self, client):
        response = client.post(
            REGISTER_URL,
            json={"email": "not-an-email", "password": "abc", "lastName": "D"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "VALIDATION"
        assert body["statusCode"] == 400
        assert body["details"]["email"] == ["Invalid email format"]
        assert body["details"]["password"] == [
            "Password must be at least 8 characters long",
            "Password must contain at least one uppercase letter, "
            "one lowercase letter, and one number",
        ]
        assert body["details"]["firstName"] == ["First name is required"]
        assert "lastName" not in body["details"]

    def test_malformed_json(self, client):
        response = client.post(
            REGISTER_URL,
            content=b'{"email": ',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"] == {"_schema": ["Malformed JSON body"]}


@pytest.mark.api
class TestLogin:
    def test_login_returns_token_and_cookie(self, client):
        client.post(REGISTER_URL, json=registration())
        client.cookies.clear()

        response = client.post(
            LOGIN_URL, json={"email": "ADA@example.com", "password": "Secret123"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == "ada@example.com"
        assert response.cookies.get("token") == data["token"]

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        client.post(REGISTER_URL, json=registration())

        wrong_password = client.post(
            LOGIN_URL, json={"email": "ada@example.com", "password": "Wrong1234"}
        )
        unknown_email = client.post(
            LOGIN_URL, json={"email": "nobody@example.com", "password": "Secret123"}
        )

        assert wrong_password.status_code == status.HTTP_401_UNAUTHORIZED
        assert wrong_password.json() == unknown_email.json() == {
            "error": "Invalid email or password",
            "code": "AUTHENTICATION",
            "statusCode": 401,
        }

    def test_missing_fields(self, client):
        response = client.post(LOGIN_URL, json={})

        assert response.json()["details"] == {
            "email": ["Email is required"],
            "password": ["Password is required"],
        }


@pytest.mark.api
class TestAuthRateLimit:
    def test_sixth_login_attempt_is_rate_limited(self, client, clock):
        # Arrange
        credentials = {"email": "ada@example.com", "password": "Wrong1234"}
        responses = [client.post(LOGIN_URL, json=credentials) for _ in range(5)]
        clock.advance(seconds=60)

        # Act
        response = client.post(LOGIN_URL, json=credentials)

        # Assert
        assert [r.headers["X-RateLimit-Remaining"] for r in responses] == [
            "4",
            "3",
            "2",
            "1",
            "0",
        ]
        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.json() == {
            "error": "Too many login attempts",
            "code": "RATE_LIMITED",
            "statusCode": 429,
            "details": {"resetAt": "2024-05-01T12:15:00.000Z"},
        }
        assert response.headers["X-RateLimit-Limit"] == "5"
        assert response.headers["X-RateLimit-Remaining"] == "0"
        assert response.headers["X-RateLimit-Reset"] == "2024-05-01T12:15:00.000Z"
        assert response.headers["Retry-After"] == "840"

    def test_valid_credentials_are_still_limited(self, client):
        client.post(REGISTER_URL, json=registration())
        credentials = {"email": "ada@example.com", "password": "Secret123"}
        for _ in range(5):
            client.post(LOGIN_URL, json=credentials)

        response = client.post(LOGIN_URL, json=credentials)

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    def test_registration_has_its_own_budget(self, client):
        for n in range(5):
            client.post(LOGIN_URL, json={"email": f"u{n}@example.com", "password": "x"})

        response = client.post(REGISTER_URL, json=registration())

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["message"] == "Registration successful"

    def test_window_reopens(self, client, clock):
        for _ in range(6):
            client.post(LOGIN_URL, json={})
        clock.advance(minutes=15)

        response = client.post(LOGIN_URL, json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_forwarded_for_is_ignored_by_default(self, client):
        for n in range(5):
            client.post(
                LOGIN_URL, json={}, headers={"X-Forwarded-For": f"198.51.100.{n}"}
            )

        response = client.post(
            LOGIN_URL, json={}, headers={"X-Forwarded-For": "198.51.100.99"}
        )

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
