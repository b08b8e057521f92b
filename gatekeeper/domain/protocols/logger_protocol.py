"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging. Implementations MUST keep logs
structured (message plus key-value context) and safe: never log passwords,
tokens or secrets.

Usage:
    from gatekeeper.core.container import get_logger

    logger = get_logger()
    request_logger = logger.bind(trace_id=trace_id, operation="login")
    request_logger.warning("Rate limit exceeded", limit=5)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (same contract as error())."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            request_logger = logger.bind(trace_id=trace_id)
            request_logger.info("Request started")  # trace_id included
        """
        ...
