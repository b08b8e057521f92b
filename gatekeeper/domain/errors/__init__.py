"""Domain errors package.

Storage errors are part of the UserRepository contract, so they live in
the domain next to the protocol rather than in infrastructure.

Usage:
    from gatekeeper.domain.errors import DuplicateKeyError, RecordNotFoundError
"""

from gatekeeper.domain.errors.storage_error import (
    DuplicateKeyError,
    RecordNotFoundError,
    StorageError,
    StorageValidationError,
)

__all__ = [
    "StorageError",
    "DuplicateKeyError",
    "RecordNotFoundError",
    "StorageValidationError",
]
