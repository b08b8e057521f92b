"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded once from environment variables
(prefix `GATEKEEPER_`) at process start. The Settings object is frozen:
signing secret, token lifetime and rate-limit policies cannot change while
the process runs. Rotating the secret means restarting, which invalidates
every previously issued token.

Usage:
    from gatekeeper.core.config import get_settings

    settings = get_settings()
    lifetime = settings.access_token_lifetime
    if settings.is_production:
        ...
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatekeeper.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Keyword arguments (tests)
        2. Environment variables (GATEKEEPER_*)
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(default="Gatekeeper", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    api_prefix: str = Field(default="/api", description="API route prefix")

    # Security configuration
    secret_key: str = Field(
        min_length=32,
        description="Secret key for HS256 token signing (at least 32 characters)",
    )
    access_token_expire_minutes: int = Field(
        default=7 * 24 * 60,
        ge=1,
        description="Access token lifetime in minutes (default: 7 days)",
    )
    session_cookie_name: str = Field(
        default="token",
        description="Name of the HTTP-only cookie carrying the session token",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds (10-14 recommended, 12 = ~250ms)",
    )

    # Rate limit policies (limit per fixed window)
    rate_limit_auth_limit: int = Field(default=5, ge=1)
    rate_limit_auth_window_seconds: int = Field(default=15 * 60, ge=1)
    rate_limit_api_limit: int = Field(default=100, ge=1)
    rate_limit_api_window_seconds: int = Field(default=15 * 60, ge=1)
    rate_limit_strict_limit: int = Field(default=3, ge=1)
    rate_limit_strict_window_seconds: int = Field(default=5 * 60, ge=1)
    rate_limit_sweep_interval_seconds: int = Field(
        default=60,
        ge=1,
        description="Minimum seconds between lazy sweeps of expired counters",
    )
    trust_forwarded_for: bool = Field(
        default=False,
        description="Take the client address from X-Forwarded-For (behind a trusted proxy only)",
    )

    model_config = SettingsConfigDict(
        env_prefix="GATEKEEPER_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the range bcrypt accepts.

        Args:
            v: Number of bcrypt rounds.

        Returns:
            int: Validated bcrypt rounds.

        Raises:
            ValueError: If rounds are not between 4 and 31.
        """
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def uses_json_logs(self) -> bool:
        """JSON log output everywhere except local development."""
        return self.environment != Environment.DEVELOPMENT

    @property
    def access_token_lifetime(self) -> timedelta:
        """Token lifetime as a timedelta."""
        return timedelta(minutes=self.access_token_expire_minutes)

    @property
    def rate_limit_sweep_interval(self) -> timedelta:
        """Sweep interval as a timedelta."""
        return timedelta(seconds=self.rate_limit_sweep_interval_seconds)


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process.

    Returns:
        Settings: Cached application settings.

    Raises:
        pydantic.ValidationError: If required settings (secret key) are missing.
    """
    return Settings()  # type: ignore[call-arg]
