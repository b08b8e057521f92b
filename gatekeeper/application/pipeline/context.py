"""Per-request pipeline values."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PipelineStage(str, Enum):
    """Pipeline states, in execution order."""

    RATE_CHECK = "rate_check"
    PARSE_VALIDATE = "parse_validate"
    AUTHENTICATE = "authenticate"
    EXECUTE = "execute"
    FORMAT = "format"


@dataclass(frozen=True, kw_only=True)
class RequestContext:
    """Transport-independent view of one inbound request.

    Attributes:
        client_address: Address used in the rate-limit key.
        headers: Request headers.
        cookies: Request cookies.
        body: Raw body bytes; None or empty means no body.
        trace_id: Correlation id bound to every log line of the request.
    """

    client_address: str
    headers: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    trace_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class PipelineOutcome:
    """The single result of running an operation.

    Attributes:
        status_code: HTTP status.
        body: Success or error envelope.
        headers: Response headers (rate-limit headers included).
        session_token: Token to set as the session cookie, if any.
        stage: Stage that produced the outcome (EXECUTE on success).
    """

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)
    session_token: str | None = None
    stage: PipelineStage = PipelineStage.EXECUTE
