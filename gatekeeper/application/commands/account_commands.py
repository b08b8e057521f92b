"""Account commands (write and read intents).

All commands are immutable (frozen=True) and keyword-only (kw_only=True).
Fields are already validated and normalized by the request pipeline;
handlers do not re-validate them.
"""

from dataclasses import dataclass, field
from typing import Any

from gatekeeper.domain.enums import UserRole

# Wire name (camelCase) -> User attribute, for profile updates
PROFILE_FIELD_MAP: dict[str, str] = {
    "firstName": "first_name",
    "lastName": "last_name",
    "phone": "phone",
    "bio": "bio",
    "skills": "skills",
    "experience": "experience",
}


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new user account.

    Attributes:
        email: Normalized email.
        password: Plaintext password (hashed by the handler).
        first_name: Trimmed first name.
        last_name: Trimmed last name.
        role: Self-assigned role.

    Example:
        >>> command = RegisterUser.from_data(result.value)
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.CANDIDATE

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "RegisterUser":
        """Build from the validated REGISTRATION value."""
        return cls(
            email=data["email"],
            password=data["password"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            role=UserRole(data.get("role", UserRole.CANDIDATE.value)),
        )


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and password."""

    email: str
    password: str

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "LoginUser":
        """Build from the validated LOGIN value."""
        return cls(email=data["email"], password=data["password"])


@dataclass(frozen=True, kw_only=True)
class GetProfile:
    """Read the caller's own profile."""

    user_id: str


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Partially update the caller's own profile.

    Attributes:
        user_id: Token subject.
        changes: User attribute -> new value; only supplied fields.
    """

    user_id: str
    changes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_data(cls, user_id: str, data: dict[str, Any]) -> "UpdateProfile":
        """Build from the validated PROFILE_UPDATE value."""
        return cls(
            user_id=user_id,
            changes={
                PROFILE_FIELD_MAP[name]: value
                for name, value in data.items()
                if name in PROFILE_FIELD_MAP
            },
        )
