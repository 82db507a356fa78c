"""Observability components: logging and metrics."""

from recipe_ai.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    get_logger,
    logger,
    setup_logging,
)
from recipe_ai.observability.metrics import (
    record_outcome,
    record_tokens,
    setup_metrics,
)


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "record_outcome",
    "record_tokens",
    "setup_metrics",
    "setup_logging",
]
