"""Framework-level exception handlers."""

from gatekeeper.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["register_exception_handlers"]
