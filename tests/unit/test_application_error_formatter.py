"""Unit tests for ErrorFormatter and ErrorEnvelope.

Tests cover:
- One envelope per DomainError variant, status fixed by kind
- Storage exceptions translated to CONFLICT / NOT_FOUND / VALIDATION
- INTERNAL envelopes never leak exception text
- Wire serialization (aliases, omitted details)
"""

from datetime import timedelta

import pytest

from gatekeeper.application.errors import ErrorEnvelope, ErrorFormatter
from gatekeeper.core.enums import ErrorKind
from gatekeeper.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from gatekeeper.domain.errors import (
    DuplicateKeyError,
    RecordNotFoundError,
    StorageValidationError,
)
from tests.utils.clock import T0


@pytest.mark.unit
class TestFormatDomainErrors:
    def test_validation_carries_field_errors(self, formatter):
        # Arrange
        error = ValidationError(
            message="Validation failed",
            field_errors={"email": ["Invalid email format"]},
        )

        # Act
        wire = formatter.format(error).to_wire()

        # Assert
        assert wire == {
            "error": "Validation failed",
            "code": "VALIDATION",
            "statusCode": 400,
            "details": {"email": ["Invalid email format"]},
        }

    def test_validation_without_field_errors_omits_details(self, formatter):
        wire = formatter.format(ValidationError(message="Validation failed")).to_wire()

        assert "details" not in wire

    def test_rate_limited_carries_reset_at(self, formatter):
        error = RateLimitedError(
            message="Too many login attempts",
            reset_at=T0 + timedelta(minutes=15),
            limit=5,
        )

        wire = formatter.format(error).to_wire()

        assert wire == {
            "error": "Too many login attempts",
            "code": "RATE_LIMITED",
            "statusCode": 429,
            "details": {"resetAt": "2024-05-01T12:15:00.000Z"},
        }

    @pytest.mark.parametrize(
        ("error", "kind", "status"),
        [
            (AuthenticationError(message="Invalid or expired token"), "AUTHENTICATION", 401),
            (AuthorizationError(message="Access denied"), "AUTHORIZATION", 403),
            (NotFoundError(message="User not found", resource_type="User"), "NOT_FOUND", 404),
            (
                ConflictError(message="Email already registered", resource_type="User"),
                "CONFLICT",
                409,
            ),
        ],
        ids=["authentication", "authorization", "not-found", "conflict"],
    )
    def test_message_passes_through(self, formatter, error, kind, status):
        wire = formatter.format(error).to_wire()

        assert wire == {"error": error.message, "code": kind, "statusCode": status}


@pytest.mark.unit
class TestFormatStorageErrors:
    def test_duplicate_key_is_conflict(self, formatter):
        envelope = formatter.format(DuplicateKeyError("email"))

        assert envelope.kind is ErrorKind.CONFLICT
        assert envelope.http_status == 409
        assert envelope.message == "email already exists"

    def test_record_not_found_uses_default_message(self, formatter):
        envelope = formatter.format(RecordNotFoundError("users", "secret-id-123"))

        assert envelope.kind is ErrorKind.NOT_FOUND
        assert envelope.message == "Resource not found"
        assert "secret-id-123" not in str(envelope.to_wire())

    def test_storage_validation_is_validation(self, formatter):
        envelope = formatter.format(
            StorageValidationError({"bio": ["Bio cannot exceed 500 characters"]})
        )

        assert envelope.kind is ErrorKind.VALIDATION
        assert envelope.details == {"bio": ["Bio cannot exceed 500 characters"]}


@pytest.mark.unit
class TestFormatInternal:
    def test_unexpected_exception_is_generic(self, formatter, logger):
        # Act
        wire = formatter.format(RuntimeError("db password is hunter2")).to_wire()

        # Assert
        assert wire == {
            "error": "Internal server error",
            "code": "INTERNAL",
            "statusCode": 500,
        }
        [(message, context)] = logger.at("error")
        assert message == "Unhandled exception"
        assert context["error_type"] == "RuntimeError"
        assert context["error_message"] == "db password is hunter2"

    def test_internal_error_message_goes_to_log_only(self, formatter, logger):
        wire = formatter.format(InternalError(message="cache corrupted")).to_wire()

        assert wire["error"] == "Internal server error"
        assert logger.at("error")[0][1]["error_message"] == "cache corrupted"

    def test_request_logger_overrides_default(self, formatter, logger):
        request_logger = logger.bind(trace_id="trace-1")

        formatter.format(KeyError("boom"), logger=request_logger)

        assert logger.at("error")[0][1]["trace_id"] == "trace-1"

    def test_unrecognized_value_is_internal(self, formatter):
        envelope = formatter.format("not an error")  # type: ignore[arg-type]

        assert envelope.kind is ErrorKind.INTERNAL


@pytest.mark.unit
class TestErrorEnvelope:
    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_status_follows_kind(self, kind):
        envelope = ErrorEnvelope.for_kind(kind)

        assert envelope.http_status == kind.http_status
        assert envelope.message == kind.default_message

    def test_envelope_is_immutable(self):
        envelope = ErrorEnvelope.for_kind(ErrorKind.CONFLICT)

        with pytest.raises(Exception):
            envelope.message = "changed"  # type: ignore[misc]
