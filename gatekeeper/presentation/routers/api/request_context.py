"""Starlette request -> RequestContext."""

from fastapi import Request

from gatekeeper.application.pipeline import RequestContext
from gatekeeper.core.config import Settings

ANONYMOUS_CLIENT = "anonymous"


def resolve_client_address(request: Request, *, trust_forwarded_for: bool) -> str:
    """Pick the address used in rate-limit keys.

    X-Forwarded-For (first hop) and X-Real-IP are honoured only when the
    service sits behind a trusted proxy; otherwise clients could pick their
    own rate-limit bucket.

    Args:
        request: Incoming request.
        trust_forwarded_for: Whether proxy headers may be trusted.

    Returns:
        str: Client address, or "anonymous" when unknown.
    """
    if trust_forwarded_for:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            first_hop = forwarded_for.split(",")[0].strip()
            if first_hop:
                return first_hop
        real_ip = request.headers.get("x-real-ip")
        if real_ip and real_ip.strip():
            return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return ANONYMOUS_CLIENT


async def build_request_context(
    request: Request, settings: Settings, *, read_body: bool
) -> RequestContext:
    """Capture what the pipeline needs from a request.

    Args:
        request: Incoming request.
        settings: Application settings.
        read_body: Read the body (operations without a schema skip it).

    Returns:
        RequestContext: Transport-independent request view.
    """
    return RequestContext(
        client_address=resolve_client_address(
            request, trust_forwarded_for=settings.trust_forwarded_for
        ),
        headers=request.headers,
        cookies=request.cookies,
        body=await request.body() if read_body else None,
        trace_id=getattr(request.state, "trace_id", None),
    )
