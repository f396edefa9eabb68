"""Structured logging for engine operations."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Outcomes logged at INFO; anything else is a warning
_QUIET_OUTCOMES = ("success", "clean")


class StructuredEngineLogger:
    """Structured logger for engine operations."""

    def log_operation(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        **details: Any,
    ) -> None:
        """Log one engine call with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 3),
        }
        log_data.update(details)

        log_msg = f"Engine operation: {operation} - {outcome}"

        if outcome in _QUIET_OUTCOMES:
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
