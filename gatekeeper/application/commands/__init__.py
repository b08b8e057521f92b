"""Account commands."""

from gatekeeper.application.commands.account_commands import (
    PROFILE_FIELD_MAP,
    GetProfile,
    LoginUser,
    RegisterUser,
    UpdateProfile,
)

__all__ = [
    "PROFILE_FIELD_MAP",
    "GetProfile",
    "LoginUser",
    "RegisterUser",
    "UpdateProfile",
]
