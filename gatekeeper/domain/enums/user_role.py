"""User roles carried in bearer tokens.

Closed set of role tags. Candidates and recruiters pick their role at
registration; admin is only ever assigned out of band.

Usage:
    from gatekeeper.domain.enums import UserRole

    if payload.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Account roles.

    String Enum:
        Inherits from str so it serializes directly into token claims
        and JSON responses.
    """

    CANDIDATE = "candidate"
    RECRUITER = "recruiter"
    ADMIN = "admin"


# Roles a user may choose for themselves at registration
SELF_ASSIGNABLE_ROLES: tuple[UserRole, ...] = (UserRole.CANDIDATE, UserRole.RECRUITER)
