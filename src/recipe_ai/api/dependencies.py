"""FastAPI dependencies for service access.

Services are initialized during application startup and stored in app.state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, Request, status

from recipe_ai.services.generation import RecipeGenerationService
from recipe_ai.storage import KeyValueStore


DEFAULT_CALLER_ID = "anonymous"


async def get_generation_service(request: Request) -> RecipeGenerationService:
    """Get the recipe generation service from app state.

    Raises:
        HTTPException: 503 if service is not initialized.
    """
    service: RecipeGenerationService | None = getattr(
        request.app.state, "generation_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe generation service not available",
        )
    return service


async def get_store(request: Request) -> KeyValueStore | None:
    """Get the shared key-value store, if initialized."""
    return getattr(request.app.state, "store", None)


async def get_caller_id(
    x_caller_id: Annotated[str | None, Header(alias="X-Caller-ID")] = None,
) -> str:
    """Identity used for rate limiting; anonymous callers share one budget."""
    caller_id = (x_caller_id or "").strip()
    return caller_id or DEFAULT_CALLER_ID
