"""Registration handler.

Flow:
1. Check email uniqueness
2. Hash password (worker thread)
3. Create User entity with a time-ordered id
4. Persist
5. Issue session token
6. Return Success(201, user, token)

A duplicate that slips past step 1 (concurrent registration) surfaces as
DuplicateKeyError from the repository; the pipeline formats it as CONFLICT.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (adapters are injected via protocols)
"""

import asyncio

from uuid_extensions import uuid7

from gatekeeper.application.commands.account_commands import RegisterUser
from gatekeeper.application.dtos import OperationInput, OperationSuccess
from gatekeeper.core.errors import ConflictError, DomainError
from gatekeeper.core.result import Failure, Result, Success
from gatekeeper.domain.entities import User
from gatekeeper.domain.protocols import (
    ClockProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenServiceProtocol,
    UserRepository,
)

EMAIL_ALREADY_EXISTS = "User with this email already exists"


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenServiceProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            token_service: Session token issuer.
            clock: Time source for created_at/updated_at.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[OperationSuccess, DomainError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (validated and normalized).

        Returns:
            Success(OperationSuccess) with status 201, the public user and a
            session token; Failure(ConflictError) if the email is taken.

        Raises:
            StorageError: Propagated from the repository for the pipeline
                to format.
        """
        existing_user = await self._user_repo.find_by_unique_key(cmd.email)
        if existing_user is not None:
            return Failure(
                error=ConflictError(
                    message=EMAIL_ALREADY_EXISTS,
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        password_hash = await asyncio.to_thread(
            self._password_service.hash_password, cmd.password
        )

        now = self._clock.now()
        user = User(
            id=str(uuid7()),
            email=cmd.email,
            password_hash=password_hash,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            role=cmd.role,
            created_at=now,
            updated_at=now,
        )
        created = await self._user_repo.create(user)

        token = self._token_service.issue(
            subject_id=created.id, email=created.email, role=created.role
        )
        self._logger.info("User registered", user_id=created.id, role=created.role.value)

        return Success(
            value=OperationSuccess(
                message="Registration successful",
                fields={"user": created.to_public_dict(), "token": token},
                status_code=201,
                session_token=token,
            )
        )

    async def execute(
        self, op_input: OperationInput
    ) -> Result[OperationSuccess, DomainError]:
        """Pipeline entry point: build the command from validated input."""
        return await self.handle(RegisterUser.from_data(op_input.data))
