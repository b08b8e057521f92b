"""Failure -> ErrorEnvelope normalization.

Every failure that leaves the service goes through `ErrorFormatter.format`:
DomainError variants from the pipeline and handlers, typed storage
exceptions from the repository, and anything nobody anticipated.

Wire shape:
    {"error": str, "code": <ErrorKind>, "statusCode": int, "details"?: object}

Invariant: INTERNAL envelopes carry only the generic message. The original
exception type and text go to the log sink, never into the envelope.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gatekeeper.core.enums import ErrorKind
from gatekeeper.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from gatekeeper.core.timestamps import to_iso8601
from gatekeeper.domain.errors import (
    DuplicateKeyError,
    RecordNotFoundError,
    StorageValidationError,
)
from gatekeeper.domain.protocols import LoggerProtocol


class ErrorEnvelope(BaseModel):
    """Normalized failure (one per request, never shared).

    Attributes:
        message: Caller-safe message (`error` on the wire).
        kind: Taxonomy kind (`code` on the wire).
        http_status: Status fixed by the kind (`statusCode` on the wire).
        details: Field errors for VALIDATION, `resetAt` for RATE_LIMITED.
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(serialization_alias="error")
    kind: ErrorKind = Field(serialization_alias="code")
    http_status: int = Field(serialization_alias="statusCode")
    details: dict[str, Any] | None = None

    @classmethod
    def for_kind(
        cls,
        kind: ErrorKind,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> "ErrorEnvelope":
        """Build an envelope whose status follows from its kind."""
        return cls(
            message=message or kind.default_message,
            kind=kind,
            http_status=kind.http_status,
            details=details,
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the response body (camelCase aliases, no null details)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorFormatter:
    """Maps any failure into an ErrorEnvelope.

    Example:
        >>> formatter = ErrorFormatter(logger=get_logger())
        >>> formatter.format(DuplicateKeyError("email")).to_wire()
        {'error': 'email already exists', 'code': 'CONFLICT', 'statusCode': 409}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def format(
        self,
        failure: DomainError | Exception,
        *,
        logger: LoggerProtocol | None = None,
    ) -> ErrorEnvelope:
        """Normalize a failure.

        Args:
            failure: DomainError variant or exception.
            logger: Request-scoped logger for INTERNAL failures (defaults to
                the formatter's own).

        Returns:
            ErrorEnvelope: Exactly one envelope.
        """
        match failure:
            case ValidationError(message=message, field_errors=field_errors):
                return ErrorEnvelope.for_kind(
                    ErrorKind.VALIDATION, message, dict(field_errors) or None
                )
            case RateLimitedError(message=message, reset_at=reset_at):
                return ErrorEnvelope.for_kind(
                    ErrorKind.RATE_LIMITED,
                    message,
                    {"resetAt": to_iso8601(reset_at)},
                )
            case (
                AuthenticationError()
                | AuthorizationError()
                | NotFoundError()
                | ConflictError()
            ):
                return ErrorEnvelope.for_kind(failure.kind, failure.message)
            case DuplicateKeyError(field=field_name):
                return ErrorEnvelope.for_kind(
                    ErrorKind.CONFLICT, f"{field_name} already exists"
                )
            case RecordNotFoundError():
                return ErrorEnvelope.for_kind(ErrorKind.NOT_FOUND)
            case StorageValidationError(field_errors=field_errors):
                return ErrorEnvelope.for_kind(
                    ErrorKind.VALIDATION, None, dict(field_errors) or None
                )
            case InternalError(message=message):
                (logger or self._logger).error(
                    "Internal failure", error_type="InternalError", error_message=message
                )
                return ErrorEnvelope.for_kind(ErrorKind.INTERNAL)
            case Exception():
                (logger or self._logger).error("Unhandled exception", error=failure)
                return ErrorEnvelope.for_kind(ErrorKind.INTERNAL)
            case _:
                (logger or self._logger).error(
                    "Unrecognized failure", failure_type=type(failure).__name__
                )
                return ErrorEnvelope.for_kind(ErrorKind.INTERNAL)
