"""Domain entities."""

from gatekeeper.domain.entities.user import User

__all__ = ["User"]
