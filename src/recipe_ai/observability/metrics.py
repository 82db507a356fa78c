"""Prometheus metrics instrumentation.

This module provides:
- FastAPI automatic request metrics
- Generation outcome counters that keep every failure kind distinct
- Provider token counters
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from recipe_ai.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recipe_ai.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "recipe_ai"

GENERATION_OUTCOMES = Counter(
    "generation_outcomes_total",
    "Recipe generation outcomes by result and serving source.",
    labelnames=("outcome", "source"),
    namespace=METRIC_NAMESPACE,
)

PROVIDER_TOKENS = Counter(
    "provider_tokens_total",
    "Tokens exchanged with hosted providers.",
    labelnames=("provider", "direction"),
    namespace=METRIC_NAMESPACE,
)


def record_outcome(outcome: str, source: str) -> None:
    """Count one generation outcome (e.g. ``success``/``provider``)."""
    GENERATION_OUTCOMES.labels(outcome=outcome, source=source).inc()


def record_tokens(provider: str, prompt_tokens: int, completion_tokens: int) -> None:
    """Count provider token usage for one call."""
    PROVIDER_TOKENS.labels(provider=provider, direction="input").inc(prompt_tokens)
    PROVIDER_TOKENS.labels(provider=provider, direction="output").inc(
        completion_tokens
    )


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator:
    """Configure Prometheus HTTP metrics and expose the scrape endpoint.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Returns:
        Configured Instrumentator instance.
    """
    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    prefix = settings.api.v1_prefix

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[f"{prefix}/health", f"{prefix}/metrics"],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
            should_only_respect_2xx_for_highr=False,
        )
    )
    instrumentator.instrument(app)

    metrics_endpoint = f"{prefix}/metrics"
    instrumentator.expose(
        app,
        endpoint=metrics_endpoint,
        include_in_schema=True,
        tags=["Monitoring"],
    )

    logger.info("Prometheus metrics configured", endpoint=metrics_endpoint)
    return instrumentator


__all__ = [
    "GENERATION_OUTCOMES",
    "PROVIDER_TOKENS",
    "record_outcome",
    "record_tokens",
    "setup_metrics",
]
