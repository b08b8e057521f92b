"""Login handler.

Unknown email and wrong password produce the same AuthenticationError so
the response does not reveal which accounts exist.
"""

import asyncio

from gatekeeper.application.commands.account_commands import LoginUser
from gatekeeper.application.dtos import OperationInput, OperationSuccess
from gatekeeper.core.errors import AuthenticationError, DomainError
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenServiceProtocol,
    UserRepository,
)

INVALID_CREDENTIALS = "Invalid email or password"


class LoginUserHandler:
    """Handler for the login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[OperationSuccess, DomainError]:
        """Verify credentials and issue a session token.

        Returns:
            Success(OperationSuccess) with the public user and token, or
            Failure(AuthenticationError) for bad credentials.
        """
        user = await self._user_repo.find_by_unique_key(cmd.email)
        if user is None:
            self._logger.info("Login rejected", reason="unknown_email")
            return Failure(error=AuthenticationError(message=INVALID_CREDENTIALS))

        password_ok = await asyncio.to_thread(
            self._password_service.verify_password, cmd.password, user.password_hash
        )
        if not password_ok:
            self._logger.info("Login rejected", reason="bad_password", user_id=user.id)
            return Failure(error=AuthenticationError(message=INVALID_CREDENTIALS))

        token = self._token_service.issue(
            subject_id=user.id, email=user.email, role=user.role
        )
        self._logger.info("User logged in", user_id=user.id)

        return Success(
            value=OperationSuccess(
                message="Login successful",
                fields={"user": user.to_public_dict(), "token": token},
                session_token=token,
            )
        )

    async def execute(
        self, op_input: OperationInput
    ) -> Result[OperationSuccess, DomainError]:
        """Pipeline entry point."""
        return await self.handle(LoginUser.from_data(op_input.data))
