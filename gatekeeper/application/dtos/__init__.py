"""Application DTOs."""

from gatekeeper.application.dtos.operation_dtos import (
    OperationInput,
    OperationSuccess,
)

__all__ = ["OperationInput", "OperationSuccess"]
