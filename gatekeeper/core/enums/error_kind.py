"""Error taxonomy exposed at the trust boundary.

Every failure that leaves the service is classified as exactly one of
these kinds. The value is what clients see in the envelope's `code`
field; the HTTP status is fixed per kind.

Kinds:
    VALIDATION      400  malformed or out-of-range input
    AUTHENTICATION  401  missing, malformed, expired or forged credential
    AUTHORIZATION   403  valid identity lacking permission
    NOT_FOUND       404  referenced entity absent
    CONFLICT        409  uniqueness violation at the storage boundary
    RATE_LIMITED    429  admission denied by the rate limiter
    INTERNAL        500  anything unanticipated (zero detail to the caller)
"""

from enum import Enum
from http import HTTPStatus


class ErrorKind(str, Enum):
    """Closed set of error classifications."""

    VALIDATION = "VALIDATION"
    AUTHENTICATION = "AUTHENTICATION"
    AUTHORIZATION = "AUTHORIZATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    RATE_LIMITED = "RATE_LIMITED"
    INTERNAL = "INTERNAL"

    @property
    def http_status(self) -> int:
        """HTTP status code associated with this kind."""
        return int(_HTTP_STATUS[self])

    @property
    def default_message(self) -> str:
        """Caller-safe message used when a failure carries no better one."""
        return _DEFAULT_MESSAGES[self]

    @classmethod
    def from_http_status(cls, status_code: int) -> "ErrorKind":
        """Find the kind for a framework-level HTTP status.

        Statuses outside the taxonomy collapse to VALIDATION for 4xx and
        INTERNAL for everything else.

        Example:
            >>> ErrorKind.from_http_status(404)
            <ErrorKind.NOT_FOUND: 'NOT_FOUND'>
            >>> ErrorKind.from_http_status(405)
            <ErrorKind.VALIDATION: 'VALIDATION'>
        """
        for kind, status in _HTTP_STATUS.items():
            if status == status_code:
                return kind
        if 400 <= status_code < 500:
            return cls.VALIDATION
        return cls.INTERNAL


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.AUTHENTICATION: HTTPStatus.UNAUTHORIZED,
    ErrorKind.AUTHORIZATION: HTTPStatus.FORBIDDEN,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.RATE_LIMITED: HTTPStatus.TOO_MANY_REQUESTS,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}

_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.VALIDATION: "Validation failed",
    ErrorKind.AUTHENTICATION: "Authentication failed",
    ErrorKind.AUTHORIZATION: "Access denied",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.CONFLICT: "Resource already exists",
    ErrorKind.RATE_LIMITED: "Too many requests",
    ErrorKind.INTERNAL: "Internal server error",
}
