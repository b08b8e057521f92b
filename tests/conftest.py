"""Shared pytest fixtures.

Settings are read from the environment at import time by the container,
so a test secret and the testing environment are set before any
gatekeeper module is imported.

Fixtures build real adapters around a ManualClock so window and expiry
tests move time explicitly instead of sleeping.
"""

import os

os.environ.setdefault("GATEKEEPER_SECRET_KEY", "test-secret-key-" + "x" * 32)
os.environ.setdefault("GATEKEEPER_ENVIRONMENT", "testing")

import pytest  # noqa: E402

from gatekeeper.application.errors import ErrorFormatter  # noqa: E402
from gatekeeper.application.pipeline import RequestPipeline  # noqa: E402
from gatekeeper.config.rate_limits import build_policies  # noqa: E402
from gatekeeper.core.config import Settings, get_settings  # noqa: E402
from gatekeeper.core.enums import Environment  # noqa: E402
from gatekeeper.infrastructure.persistence import InMemoryUserRepository  # noqa: E402
from gatekeeper.infrastructure.rate_limit import FixedWindowRateLimiter  # noqa: E402
from gatekeeper.infrastructure.security import JWTService  # noqa: E402
from tests.utils.clock import ManualClock  # noqa: E402
from tests.utils.logger import RecordingLogger  # noqa: E402
from tests.utils.passwords import PlainPasswordService  # noqa: E402

TEST_SECRET = "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; isolate tests that touch env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings for the testing environment with fast bcrypt."""
    return Settings(
        secret_key=TEST_SECRET,
        environment=Environment.TESTING,
        bcrypt_rounds=4,
    )


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def rate_limiter(clock, settings) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(
        clock, sweep_interval=settings.rate_limit_sweep_interval
    )


@pytest.fixture
def token_service(clock, settings) -> JWTService:
    return JWTService(
        TEST_SECRET,
        clock=clock,
        lifetime=settings.access_token_lifetime,
        cookie_name=settings.session_cookie_name,
    )


@pytest.fixture
def password_service() -> PlainPasswordService:
    return PlainPasswordService()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def formatter(logger) -> ErrorFormatter:
    return ErrorFormatter(logger=logger)


@pytest.fixture
def pipeline(rate_limiter, token_service, formatter, settings, clock, logger):
    return RequestPipeline(
        rate_limiter=rate_limiter,
        token_service=token_service,
        formatter=formatter,
        policies=build_policies(settings),
        clock=clock,
        logger=logger,
    )


@pytest.fixture
def app(settings, clock, logger, rate_limiter, token_service, user_repository):
    """Application wired to the test adapters (real bcrypt at minimum cost)."""
    from gatekeeper.core.container import (
        get_clock,
        get_logger,
        get_password_service,
        get_rate_limiter,
        get_token_service,
        get_user_repository,
    )
    from gatekeeper.infrastructure.security import BcryptPasswordService
    from gatekeeper.presentation.app import create_app

    application = create_app(settings)
    password_service = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)
    application.dependency_overrides.update(
        {
            get_clock: lambda: clock,
            get_logger: lambda: logger,
            get_rate_limiter: lambda: rate_limiter,
            get_token_service: lambda: token_service,
            get_password_service: lambda: password_service,
            get_user_repository: lambda: user_repository,
        }
    )
    return application


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)
