"""Core enums package.

Usage:
    from gatekeeper.core.enums import ErrorKind, Environment
"""

from gatekeeper.core.enums.environment import Environment
from gatekeeper.core.enums.error_kind import ErrorKind

__all__ = ["ErrorKind", "Environment"]
