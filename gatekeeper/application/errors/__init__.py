"""Error envelope and formatter.

Usage:
    from gatekeeper.application.errors import ErrorFormatter
"""

from gatekeeper.application.errors.error_formatter import (
    ErrorEnvelope,
    ErrorFormatter,
)

__all__ = ["ErrorEnvelope", "ErrorFormatter"]
