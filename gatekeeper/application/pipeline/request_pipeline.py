"""Request admission pipeline.

    RATE_CHECK -> PARSE_VALIDATE -> AUTHENTICATE (if required) -> EXECUTE -> FORMAT

A failing stage jumps straight to FORMAT; later stages never run. Every
run produces exactly one PipelineOutcome. Rate-limit headers are attached
to every outcome once RATE_CHECK has run, including failures from later
stages.

Usage:
    outcome = await pipeline.run(
        OPERATIONS[OperationName.LOGIN],
        context,
        login_handler.execute,
    )
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

from gatekeeper.application.dtos import OperationInput, OperationSuccess
from gatekeeper.application.errors import ErrorFormatter
from gatekeeper.application.pipeline.authorization import require_role
from gatekeeper.application.pipeline.context import (
    PipelineOutcome,
    PipelineStage,
    RequestContext,
)
from gatekeeper.application.pipeline.operations import Operation
from gatekeeper.config.rate_limits import RateLimitPolicyName
from gatekeeper.core.errors import (
    AuthenticationError,
    DomainError,
    RateLimitedError,
    ValidationError,
)
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.core.timestamps import to_iso8601
from gatekeeper.domain.protocols import (
    ClockProtocol,
    LoggerProtocol,
    RateLimitProtocol,
    TokenServiceProtocol,
)
from gatekeeper.domain.validators import SCHEMA_ERROR_KEY, validate
from gatekeeper.domain.value_objects import RateLimitPolicy, TokenPayload

type Executor = Callable[
    [OperationInput], Awaitable[Result[OperationSuccess, DomainError]]
]

TOKEN_REQUIRED = "Authentication token required"
MALFORMED_BODY = "Malformed JSON body"
VALIDATION_FAILED = "Validation failed"


class _StageFailure(Exception):
    """Internal short-circuit carrying the failing stage and its error."""

    def __init__(self, stage: PipelineStage, error: DomainError | Exception) -> None:
        self.stage = stage
        self.error = error
        super().__init__(str(error))


class RequestPipeline:
    """Orchestrates admission, validation and authentication for one operation."""

    def __init__(
        self,
        *,
        rate_limiter: RateLimitProtocol,
        token_service: TokenServiceProtocol,
        formatter: ErrorFormatter,
        policies: dict[RateLimitPolicyName, RateLimitPolicy],
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize the pipeline.

        Args:
            rate_limiter: Shared admission counter.
            token_service: Credential verification.
            formatter: Failure normalization.
            policies: Policy table (see config.rate_limits).
            clock: Time source for Retry-After.
            logger: Structured logger; bound per request.
        """
        self._rate_limiter = rate_limiter
        self._token_service = token_service
        self._formatter = formatter
        self._policies = policies
        self._clock = clock
        self._logger = logger

    async def run(
        self,
        operation: Operation,
        context: RequestContext,
        execute: Executor,
    ) -> PipelineOutcome:
        """Run one operation through every stage.

        Args:
            operation: Static operation configuration.
            context: Request view.
            execute: Handler entry point, called only if every gate passed.

        Returns:
            PipelineOutcome: Success or error envelope with headers.
        """
        logger = self._logger.bind(
            trace_id=context.trace_id,
            operation=operation.name.value,
            client_address=context.client_address,
        )
        headers: dict[str, str] = {}

        try:
            self._check_rate(operation, context, headers, logger)
            data = self._parse_and_validate(operation, context)
            identity = self._authenticate(operation, context, logger)

            try:
                result = await execute(OperationInput(data=data, identity=identity))
            except Exception as e:
                raise _StageFailure(PipelineStage.EXECUTE, e) from e

            match result:
                case Success(value=success):
                    return PipelineOutcome(
                        status_code=success.status_code,
                        body=success.to_wire(),
                        headers=headers,
                        session_token=success.session_token,
                        stage=PipelineStage.EXECUTE,
                    )
                case Failure(error=error):
                    raise _StageFailure(PipelineStage.EXECUTE, error)
                case _:
                    raise _StageFailure(
                        PipelineStage.EXECUTE,
                        TypeError(f"Handler returned {type(result).__name__}"),
                    )
        except _StageFailure as failure:
            envelope = self._formatter.format(failure.error, logger=logger)
            return PipelineOutcome(
                status_code=envelope.http_status,
                body=envelope.to_wire(),
                headers=headers,
                stage=failure.stage,
            )

    def _check_rate(
        self,
        operation: Operation,
        context: RequestContext,
        headers: dict[str, str],
        logger: LoggerProtocol,
    ) -> None:
        policy = self._policies[operation.policy]
        key = f"{operation.name.value}:{context.client_address}"
        result = self._rate_limiter.attempt(key, policy.limit, policy.window)

        headers["X-RateLimit-Limit"] = str(result.limit)
        headers["X-RateLimit-Remaining"] = str(result.remaining)
        headers["X-RateLimit-Reset"] = to_iso8601(result.reset_at)

        if not result.admitted:
            headers["Retry-After"] = str(
                result.retry_after_seconds(self._clock.now())
            )
            logger.warning(
                "Rate limit exceeded",
                policy=operation.policy.value,
                limit=result.limit,
                reset_at=headers["X-RateLimit-Reset"],
            )
            raise _StageFailure(
                PipelineStage.RATE_CHECK,
                RateLimitedError(
                    message=operation.rate_limit_message,
                    reset_at=result.reset_at,
                    limit=result.limit,
                ),
            )

    def _parse_and_validate(
        self, operation: Operation, context: RequestContext
    ) -> dict[str, Any]:
        if operation.schema is None:
            return {}

        raw = _decode_body(context.body)
        if raw is _MALFORMED:
            raise _StageFailure(
                PipelineStage.PARSE_VALIDATE,
                ValidationError(
                    message=VALIDATION_FAILED,
                    field_errors={SCHEMA_ERROR_KEY: [MALFORMED_BODY]},
                ),
            )

        validation = validate(operation.schema, raw)
        if not validation.is_valid:
            raise _StageFailure(
                PipelineStage.PARSE_VALIDATE,
                ValidationError(
                    message=VALIDATION_FAILED,
                    field_errors=validation.field_errors,
                ),
            )
        return validation.value

    def _authenticate(
        self,
        operation: Operation,
        context: RequestContext,
        logger: LoggerProtocol,
    ) -> TokenPayload | None:
        if not operation.requires_auth:
            return None

        token = self._token_service.extract_from_request(
            context.headers, context.cookies
        )
        if token is None:
            logger.info("Authentication failed", reason="missing_token")
            raise _StageFailure(
                PipelineStage.AUTHENTICATE,
                AuthenticationError(message=TOKEN_REQUIRED),
            )

        match self._token_service.verify(token):
            case Failure(error=error):
                logger.info("Authentication failed", reason="invalid_token")
                raise _StageFailure(PipelineStage.AUTHENTICATE, error)
            case Success(value=payload):
                identity = payload

        match require_role(identity, *operation.allowed_roles):
            case Failure(error=error):
                logger.warning(
                    "Authorization failed",
                    user_id=identity.subject_id,
                    role=identity.role.value,
                )
                raise _StageFailure(PipelineStage.AUTHENTICATE, error)
        return identity


_MALFORMED = object()


def _decode_body(body: bytes | None) -> Any:
    if body is None or not body.strip():
        return {}
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError, RecursionError):
        return _MALFORMED
