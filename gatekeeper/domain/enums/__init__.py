"""Domain enums."""

from gatekeeper.domain.enums.user_role import SELF_ASSIGNABLE_ROLES, UserRole

__all__ = ["SELF_ASSIGNABLE_ROLES", "UserRole"]
