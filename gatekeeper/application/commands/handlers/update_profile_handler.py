"""Profile update handler.

Applies only the supplied fields and bumps `updated_at`. The repository
re-checks the entity's write constraints; a violation surfaces as
StorageValidationError and is formatted as VALIDATION.
"""

from gatekeeper.application.commands.account_commands import UpdateProfile
from gatekeeper.application.commands.handlers.get_profile_handler import (
    USER_NOT_FOUND,
)
from gatekeeper.application.dtos import OperationInput, OperationSuccess
from gatekeeper.core.errors import DomainError, NotFoundError
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.domain.errors import RecordNotFoundError
from gatekeeper.domain.protocols import ClockProtocol, LoggerProtocol, UserRepository


class UpdateProfileHandler:
    """Partially update the authenticated user's profile."""

    def __init__(
        self,
        user_repo: UserRepository,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: UpdateProfile) -> Result[OperationSuccess, DomainError]:
        """Apply the changes.

        Returns:
            Success(OperationSuccess) with the updated public user, or
            Failure(NotFoundError) when the account no longer exists.
        """
        patch = {**cmd.changes, "updated_at": self._clock.now()}
        try:
            user = await self._user_repo.update_by_id(cmd.user_id, patch)
        except RecordNotFoundError:
            return Failure(
                error=NotFoundError(
                    message=USER_NOT_FOUND,
                    resource_type="User",
                    resource_id=cmd.user_id,
                )
            )

        self._logger.info(
            "Profile updated", user_id=user.id, fields=sorted(cmd.changes)
        )
        return Success(
            value=OperationSuccess(
                message="Profile updated successfully",
                fields={"user": user.to_public_dict()},
            )
        )

    async def execute(
        self, op_input: OperationInput
    ) -> Result[OperationSuccess, DomainError]:
        """Pipeline entry point; requires a verified identity."""
        if op_input.identity is None:
            raise ValueError("UpdateProfileHandler requires an authenticated identity")
        return await self.handle(
            UpdateProfile.from_data(op_input.identity.subject_id, op_input.data)
        )
