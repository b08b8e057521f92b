"""Application environment types.

Used by Settings to switch environment-specific behavior:
- DEVELOPMENT: human-readable logs, insecure cookies allowed
- TESTING / CI: JSON logs for machine parsing
- PRODUCTION: JSON logs, `Secure` session cookie
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
