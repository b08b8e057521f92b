"""Storage collaborator failures.

Unlike DomainError variants these ARE exceptions: they are raised by
repository adapters (the external document store boundary) and translated
by the error formatter into CONFLICT, NOT_FOUND or VALIDATION. Any other
exception escaping a repository is treated as INTERNAL.

The attributes name fields and collections for logging; none of them is
copied verbatim into a response envelope.
"""


class StorageError(Exception):
    """Base class for failures reported by a repository adapter."""


class DuplicateKeyError(StorageError):
    """Unique index violation.

    Attributes:
        field: Field covered by the violated unique index (e.g. "email").
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Duplicate value for unique field '{field}'")


class RecordNotFoundError(StorageError):
    """Update or delete targeted a record that does not exist.

    Attributes:
        collection: Logical collection name (e.g. "users").
        record_id: Identifier that was not found.
    """

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"No record '{record_id}' in '{collection}'")


class StorageValidationError(StorageError):
    """Record rejected by the store's own write constraints.

    Attributes:
        field_errors: Field name -> violation messages.
    """

    def __init__(self, field_errors: dict[str, list[str]]) -> None:
        self.field_errors = field_errors
        super().__init__(f"Write constraints violated: {sorted(field_errors)}")
