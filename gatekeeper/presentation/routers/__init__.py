"""HTTP routers."""

from gatekeeper.presentation.routers.api import api_router
from gatekeeper.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
