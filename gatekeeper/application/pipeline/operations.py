"""Operation table.

Each operation fixes its rate-limit policy, input schema and whether a
verified identity is required. The pipeline reads these per operation,
never per request.

    operation        policy  schema          auth
    register         AUTH    REGISTRATION    no
    login            AUTH    LOGIN           no
    profile.read     API     -               yes
    profile.update   API     PROFILE_UPDATE  yes

STRICT (3 per 5 minutes) is reserved for high-sensitivity operations;
none of the current operations uses it.
"""

from dataclasses import dataclass
from enum import Enum

from gatekeeper.config.rate_limits import RateLimitPolicyName
from gatekeeper.domain.enums import UserRole
from gatekeeper.domain.validators import SchemaName


class OperationName(str, Enum):
    """Operations served by the pipeline. The value prefixes rate-limit keys."""

    REGISTER = "register"
    LOGIN = "login"
    PROFILE_READ = "profile.read"
    PROFILE_UPDATE = "profile.update"


@dataclass(frozen=True, kw_only=True)
class Operation:
    """Static pipeline configuration for one operation.

    Attributes:
        name: Operation name.
        policy: Rate-limit policy applied at RATE_CHECK.
        schema: Input schema for PARSE_VALIDATE; None means no body is read.
        requires_auth: Run AUTHENTICATE.
        allowed_roles: Roles admitted after AUTHENTICATE; empty means any.
        rate_limit_message: Message for RATE_LIMITED envelopes.
    """

    name: OperationName
    policy: RateLimitPolicyName
    schema: SchemaName | None = None
    requires_auth: bool = False
    allowed_roles: tuple[UserRole, ...] = ()
    rate_limit_message: str = "Too many requests"


OPERATIONS: dict[OperationName, Operation] = {
    OperationName.REGISTER: Operation(
        name=OperationName.REGISTER,
        policy=RateLimitPolicyName.AUTH,
        schema=SchemaName.REGISTRATION,
        rate_limit_message="Too many registration attempts",
    ),
    OperationName.LOGIN: Operation(
        name=OperationName.LOGIN,
        policy=RateLimitPolicyName.AUTH,
        schema=SchemaName.LOGIN,
        rate_limit_message="Too many login attempts",
    ),
    OperationName.PROFILE_READ: Operation(
        name=OperationName.PROFILE_READ,
        policy=RateLimitPolicyName.API,
        requires_auth=True,
    ),
    OperationName.PROFILE_UPDATE: Operation(
        name=OperationName.PROFILE_UPDATE,
        policy=RateLimitPolicyName.API,
        schema=SchemaName.PROFILE_UPDATE,
        requires_auth=True,
    ),
}
