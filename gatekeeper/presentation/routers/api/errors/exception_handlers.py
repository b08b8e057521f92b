"""Global exception handlers for the FastAPI application.

Failures the pipeline never sees (unknown route, wrong method, an
exception escaping an endpoint) still leave the service in the standard
error envelope.

Handlers:
    http_exception_handler: framework HTTP errors (404, 405, ...)
    validation_exception_handler: FastAPI request validation errors
    generic_exception_handler: anything else -> INTERNAL, logged

Exports:
    register_exception_handlers: Register all handlers with the app
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gatekeeper.application.errors import ErrorEnvelope
from gatekeeper.core.container import get_error_formatter, get_logger, resolve
from gatekeeper.core.enums import ErrorKind
from gatekeeper.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert an HTTPException into the error envelope.

    The kind is derived from the status; the framework's detail string is
    kept as the message when it is a plain string.
    """
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    kind = ErrorKind.from_http_status(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else None
    envelope = ErrorEnvelope.for_kind(kind, message)

    # Preserve framework headers (Allow, WWW-Authenticate)
    headers = getattr(exc, "headers", None)
    return JSONResponse(
        status_code=envelope.http_status,
        content=envelope.to_wire(),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert a RequestValidationError into a VALIDATION envelope."""
    assert isinstance(exc, RequestValidationError)

    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        # ["body", "email"] -> "email"
        parts = [str(p) for p in error.get("loc", ()) if p != "body"]
        path = ".".join(parts) or "_schema"
        field_errors.setdefault(path, []).append(error.get("msg", "Invalid value"))

    envelope = ErrorEnvelope.for_kind(ErrorKind.VALIDATION, None, field_errors)
    return JSONResponse(status_code=envelope.http_status, content=envelope.to_wire())


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions as INTERNAL.

    The exception type and message are logged with the trace id; the
    response carries only the generic message.
    """
    # Runs outside TraceMiddleware, after its context has been reset
    trace_id = get_trace_id() or getattr(request.state, "trace_id", None)
    logger = resolve(request.app, get_logger).bind(
        trace_id=trace_id, path=request.url.path
    )
    envelope = resolve(request.app, get_error_formatter).format(exc, logger=logger)
    return JSONResponse(status_code=envelope.http_status, content=envelope.to_wire())


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
