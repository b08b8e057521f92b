"""Glue between FastAPI endpoints and the request pipeline."""

from fastapi import Request
from fastapi.responses import JSONResponse

from gatekeeper.application.pipeline import (
    OPERATIONS,
    Executor,
    OperationName,
    RequestPipeline,
)
from gatekeeper.core.config import Settings
from gatekeeper.presentation.routers.api.request_context import build_request_context
from gatekeeper.presentation.routers.api.responses import to_response


async def run_operation(
    request: Request,
    operation_name: OperationName,
    *,
    pipeline: RequestPipeline,
    execute: Executor,
    settings: Settings,
) -> JSONResponse:
    """Run one operation and render its outcome.

    Args:
        request: Incoming request.
        operation_name: Operation to run.
        pipeline: Request pipeline.
        execute: Handler entry point.
        settings: Application settings.

    Returns:
        JSONResponse: Success or error envelope.
    """
    operation = OPERATIONS[operation_name]
    context = await build_request_context(
        request, settings, read_body=operation.schema is not None
    )
    outcome = await pipeline.run(operation, context, execute)
    return to_response(outcome, settings)
