"""Gatekeeper rate limit policies.

Three named fixed-window budgets. Each operation picks one policy by name
(see `gatekeeper.application.pipeline.operations`); the numbers come from
settings so deployments can tune them at process start.

Defaults:
    AUTH     5 attempts per 15 minutes   (login, registration)
    API    100 requests per 15 minutes   (authenticated profile access)
    STRICT   3 attempts per 5 minutes    (high-sensitivity operations)

Usage:
    from gatekeeper.config.rate_limits import RateLimitPolicyName, build_policies

    policies = build_policies(get_settings())
    auth = policies[RateLimitPolicyName.AUTH]
"""

from enum import Enum

from gatekeeper.core.config import Settings
from gatekeeper.domain.value_objects import RateLimitPolicy


class RateLimitPolicyName(str, Enum):
    """Named admission budgets."""

    AUTH = "auth"
    API = "api"
    STRICT = "strict"


def build_policies(settings: Settings) -> dict[RateLimitPolicyName, RateLimitPolicy]:
    """Build the policy table from settings.

    Args:
        settings: Application settings.

    Returns:
        dict[RateLimitPolicyName, RateLimitPolicy]: One policy per name.
    """
    return {
        RateLimitPolicyName.AUTH: RateLimitPolicy(
            limit=settings.rate_limit_auth_limit,
            window_seconds=settings.rate_limit_auth_window_seconds,
        ),
        RateLimitPolicyName.API: RateLimitPolicy(
            limit=settings.rate_limit_api_limit,
            window_seconds=settings.rate_limit_api_window_seconds,
        ),
        RateLimitPolicyName.STRICT: RateLimitPolicy(
            limit=settings.rate_limit_strict_limit,
            window_seconds=settings.rate_limit_strict_window_seconds,
        ),
    }
