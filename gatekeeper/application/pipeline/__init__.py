"""Request pipeline: operation table, per-request values and orchestration.

Usage:
    from gatekeeper.application.pipeline import OPERATIONS, OperationName

    outcome = await pipeline.run(OPERATIONS[OperationName.LOGIN], context, handler.execute)
"""

from gatekeeper.application.pipeline.authorization import require_role
from gatekeeper.application.pipeline.context import (
    PipelineOutcome,
    PipelineStage,
    RequestContext,
)
from gatekeeper.application.pipeline.operations import (
    OPERATIONS,
    Operation,
    OperationName,
)
from gatekeeper.application.pipeline.request_pipeline import Executor, RequestPipeline

__all__ = [
    "OPERATIONS",
    "Executor",
    "Operation",
    "OperationName",
    "PipelineOutcome",
    "PipelineStage",
    "RequestContext",
    "RequestPipeline",
    "require_role",
]
