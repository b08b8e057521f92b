"""Account command handlers."""

from gatekeeper.application.commands.handlers.get_profile_handler import (
    GetProfileHandler,
)
from gatekeeper.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from gatekeeper.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from gatekeeper.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)

__all__ = [
    "GetProfileHandler",
    "LoginUserHandler",
    "RegisterUserHandler",
    "UpdateProfileHandler",
]
