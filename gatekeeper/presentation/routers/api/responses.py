"""PipelineOutcome -> HTTP response."""

from fastapi.responses import JSONResponse

from gatekeeper.application.pipeline import PipelineOutcome
from gatekeeper.core.config import Settings


def to_response(outcome: PipelineOutcome, settings: Settings) -> JSONResponse:
    """Render a pipeline outcome.

    Sets the session cookie when the outcome carries a token: HTTP-only,
    SameSite=Lax, Secure in production, path `/`, max-age equal to the
    token lifetime.

    Args:
        outcome: Pipeline outcome.
        settings: Application settings (cookie name, lifetime, environment).

    Returns:
        JSONResponse: Envelope body with rate-limit headers.
    """
    response = JSONResponse(
        status_code=outcome.status_code,
        content=outcome.body,
        headers=outcome.headers,
    )
    if outcome.session_token is not None:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=outcome.session_token,
            max_age=int(settings.access_token_lifetime.total_seconds()),
            path="/",
            secure=settings.is_production,
            httponly=True,
            samesite="lax",
        )
    return response
