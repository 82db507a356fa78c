"""Health check endpoints.

Provides liveness and readiness probes for Kubernetes and load balancers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_ai.api.dependencies import get_generation_service, get_store
from recipe_ai.core.config import Settings, get_settings
from recipe_ai.schemas.api import HealthResponse, ReadinessResponse
from recipe_ai.services.generation import RecipeGenerationService
from recipe_ai.storage import KeyValueStore


router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive. Does not check dependencies."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
)
async def readiness_check(
    settings: Annotated[Settings, Depends(get_settings)],
    service: Annotated[RecipeGenerationService, Depends(get_generation_service)],
    store: Annotated[KeyValueStore | None, Depends(get_store)],
) -> ReadinessResponse:
    """Check the shared store and report whether the provider is active.

    A missing provider is not a readiness failure; the service still serves
    fallback recipes.
    """
    store_status = "healthy" if store is not None and await store.ping() else "unhealthy"
    return ReadinessResponse(
        status="ready" if store_status == "healthy" else "degraded",
        version=settings.app.version,
        environment=settings.APP_ENV,
        provider_status=service.provider_status,
        dependencies={"store": store_status},
    )
