"""Recipe generation endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from recipe_ai.api.dependencies import get_caller_id, get_generation_service
from recipe_ai.core.exceptions import (
    BadGatewayException,
    RateLimitException,
    ServiceUnavailableException,
)
from recipe_ai.schemas.api import EnhanceRecipeRequest, SuggestionsResponse
from recipe_ai.schemas.enums import FailureKind
from recipe_ai.schemas.generation import GenerationRequest, GenerationResult, UsageStats
from recipe_ai.services.generation import RecipeGenerationService


router = APIRouter(tags=["recipes"])

GenerationServiceDep = Annotated[RecipeGenerationService, Depends(get_generation_service)]
CallerIdDep = Annotated[str, Depends(get_caller_id)]


@router.post(
    "/recipes/generate",
    response_model=GenerationResult,
    summary="Generate a recipe",
    responses={
        429: {"description": "Caller rate limit exhausted"},
        503: {"description": "Provider failed and fallback is disabled"},
    },
)
async def generate_recipe(
    body: GenerationRequest,
    service: GenerationServiceDep,
    caller_id: CallerIdDep,
    response: Response,
) -> GenerationResult:
    """Generate a recipe from available ingredients.

    Served from the cache, the hosted provider or the local fallback
    generator; `metadata.provider` says which.
    """
    result = await service.generate_recipe(body, caller_id)

    if result.failure == FailureKind.ADMISSION_DENIED:
        raise RateLimitException(result.error or "Rate limit exceeded")
    if not result.success:
        raise ServiceUnavailableException(result.error or "Recipe generation unavailable")

    if result.metadata is not None:
        response.headers["X-Recipe-Source"] = result.metadata.provider
    return result


@router.post(
    "/recipes/enhance",
    response_model=GenerationResult,
    summary="Enhance an existing recipe",
    responses={
        502: {"description": "Provider failed or returned an unusable recipe"},
        503: {"description": "No active provider"},
    },
)
async def enhance_recipe(
    body: EnhanceRecipeRequest,
    service: GenerationServiceDep,
) -> GenerationResult:
    """Ask the provider to add tips, variations, detail or better nutrition."""
    result = await service.enhance_recipe(body.recipe, body.enhancement, body.feedback)

    if result.failure == FailureKind.PROVIDER_UNAVAILABLE:
        raise ServiceUnavailableException(result.error or "Enhancement unavailable")
    if not result.success:
        raise BadGatewayException(result.error or "Enhancement failed")
    return result


@router.get(
    "/recipes/suggestions",
    response_model=SuggestionsResponse,
    summary="Suggest recipe ideas",
)
async def suggest_recipes(
    service: GenerationServiceDep,
    cuisine: Annotated[str | None, Query(max_length=50)] = None,
    mood: Annotated[str | None, Query(max_length=100)] = None,
) -> SuggestionsResponse:
    suggestions = await service.suggest_recipes(cuisine=cuisine, mood=mood)
    return SuggestionsResponse(suggestions=suggestions)


@router.get(
    "/usage",
    response_model=UsageStats,
    summary="Caller usage statistics",
)
async def get_usage(
    service: GenerationServiceDep,
    caller_id: CallerIdDep,
) -> UsageStats:
    """Remaining generation budget and whether the provider is active."""
    return await service.get_usage_stats(caller_id)


@router.delete(
    "/cache",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear the recipe cache",
)
async def clear_cache(service: GenerationServiceDep) -> Response:
    await service.clear_cache()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
