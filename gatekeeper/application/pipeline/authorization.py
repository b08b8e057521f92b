"""Role checks for authenticated operations."""

from gatekeeper.core.errors import AuthorizationError
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.domain.enums import UserRole
from gatekeeper.domain.value_objects import TokenPayload

ACCESS_DENIED = "Access denied"


def require_role(
    payload: TokenPayload, *roles: UserRole
) -> Result[TokenPayload, AuthorizationError]:
    """Admit the payload only if its role is one of `roles`.

    No roles means any authenticated identity is admitted.

    Example:
        >>> match require_role(payload, UserRole.RECRUITER):
        ...     case Failure(error=error):
        ...         error.kind
        <ErrorKind.AUTHORIZATION: 'AUTHORIZATION'>
    """
    if not roles or payload.role in roles:
        return Success(value=payload)
    return Failure(
        error=AuthorizationError(
            message=ACCESS_DENIED,
            required_roles=tuple(role.value for role in roles),
        )
    )
