"""Security adapters: token signing and password hashing."""

from gatekeeper.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from gatekeeper.infrastructure.security.jwt_service import JWTService

__all__ = ["BcryptPasswordService", "JWTService"]
