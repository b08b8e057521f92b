"""Profile read handler."""

from gatekeeper.application.commands.account_commands import GetProfile
from gatekeeper.application.dtos import OperationInput, OperationSuccess
from gatekeeper.core.errors import DomainError, NotFoundError
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.domain.protocols import UserRepository

USER_NOT_FOUND = "User not found"


class GetProfileHandler:
    """Return the authenticated user's public profile."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: GetProfile) -> Result[OperationSuccess, DomainError]:
        """Load the user named by the token subject.

        Returns:
            Success(OperationSuccess) with the public user, or
            Failure(NotFoundError) when the account no longer exists.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    message=USER_NOT_FOUND,
                    resource_type="User",
                    resource_id=cmd.user_id,
                )
            )
        return Success(
            value=OperationSuccess(
                message="Profile retrieved successfully",
                fields={"user": user.to_public_dict()},
            )
        )

    async def execute(
        self, op_input: OperationInput
    ) -> Result[OperationSuccess, DomainError]:
        """Pipeline entry point; requires a verified identity."""
        if op_input.identity is None:
            raise ValueError("GetProfileHandler requires an authenticated identity")
        return await self.handle(GetProfile(user_id=op_input.identity.subject_id))
