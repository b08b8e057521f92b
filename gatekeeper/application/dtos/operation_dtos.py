"""Operation DTOs (Data Transfer Objects).

Carry data between the request pipeline and the command handlers.

DTOs:
    - OperationInput: validated input plus the verified identity
    - OperationSuccess: what a handler returns on success
"""

from dataclasses import dataclass, field
from typing import Any

from gatekeeper.domain.value_objects import TokenPayload


@dataclass(frozen=True, kw_only=True)
class OperationInput:
    """Input handed to EXECUTE.

    Attributes:
        data: Normalized value from the validator (never the raw body).
        identity: Verified token payload; None for public operations.
    """

    data: dict[str, Any] = field(default_factory=dict)
    identity: TokenPayload | None = None


@dataclass(frozen=True, kw_only=True)
class OperationSuccess:
    """Successful operation outcome.

    Attributes:
        message: Human-readable success message.
        fields: Operation-specific response fields (`user`, `token`).
        status_code: HTTP status for the success response.
        session_token: Token to set as the session cookie, if any.
    """

    message: str
    fields: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200
    session_token: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Success envelope: `{"message": ..., **fields}`."""
        return {"message": self.message, **self.fields}
