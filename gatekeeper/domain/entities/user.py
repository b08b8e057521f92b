"""User domain entity for the account service.

Pure business data, no framework dependencies. The same length limits are
enforced twice: by the input validator (all violations reported to the
caller) and by the storage adapter on write (`write_violations`), so a
record that bypassed validation still cannot be persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from gatekeeper.core.timestamps import to_iso8601
from gatekeeper.domain.enums import UserRole

NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500
EXPERIENCE_MAX_LENGTH = 2000

FIRST_NAME_TOO_LONG = f"First name cannot exceed {NAME_MAX_LENGTH} characters"
LAST_NAME_TOO_LONG = f"Last name cannot exceed {NAME_MAX_LENGTH} characters"
BIO_TOO_LONG = f"Bio cannot exceed {BIO_MAX_LENGTH} characters"
EXPERIENCE_TOO_LONG = f"Experience cannot exceed {EXPERIENCE_MAX_LENGTH} characters"

# Entity attributes a profile update may change
UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"first_name", "last_name", "phone", "bio", "skills", "experience"}
)


@dataclass
class User:
    """User account.

    Attributes:
        id: Opaque, time-ordered identifier (token subject).
        email: Normalized (trimmed, lower-case) unique email.
        password_hash: One-way hash, never plaintext, never serialized.
        first_name: Trimmed given name.
        last_name: Trimmed family name.
        role: Account role.
        created_at: Creation timestamp (aware UTC).
        updated_at: Last modification timestamp (aware UTC).
        profile_picture: Picture URL, empty when unset.
        phone: Optional phone number.
        bio: Optional free text.
        skills: Trimmed skill tags.
        experience: Optional free text.

    Example:
        >>> user = User(
        ...     id="0190c1d2-...",
        ...     email="user@example.com",
        ...     password_hash="$2b$12$...",
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ...     role=UserRole.CANDIDATE,
        ...     created_at=now,
        ...     updated_at=now,
        ... )
        >>> "passwordHash" in user.to_public_dict()
        False
    """

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
    profile_picture: str = ""
    phone: str | None = None
    bio: str | None = None
    skills: list[str] = field(default_factory=list)
    experience: str | None = None

    def to_public_dict(self) -> dict[str, Any]:
        """Serialize for responses (camelCase, without the password hash).

        Returns:
            dict[str, Any]: JSON-ready representation.
        """
        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role.value,
            "profilePicture": self.profile_picture,
            "phone": self.phone,
            "bio": self.bio,
            "skills": list(self.skills),
            "experience": self.experience,
            "createdAt": to_iso8601(self.created_at),
            "updatedAt": to_iso8601(self.updated_at),
        }

    def write_violations(self) -> dict[str, list[str]]:
        """Check the hard write constraints.

        Returns:
            dict[str, list[str]]: Field name -> messages; empty when writable.
        """
        violations: dict[str, list[str]] = {}
        if len(self.first_name) > NAME_MAX_LENGTH:
            violations.setdefault("firstName", []).append(FIRST_NAME_TOO_LONG)
        if len(self.last_name) > NAME_MAX_LENGTH:
            violations.setdefault("lastName", []).append(LAST_NAME_TOO_LONG)
        if self.bio is not None and len(self.bio) > BIO_MAX_LENGTH:
            violations.setdefault("bio", []).append(BIO_TOO_LONG)
        if self.experience is not None and len(self.experience) > EXPERIENCE_MAX_LENGTH:
            violations.setdefault("experience", []).append(EXPERIENCE_TOO_LONG)
        return violations
