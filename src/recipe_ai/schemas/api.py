"""Request and response bodies specific to the HTTP API."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipe_ai.schemas.base import APIRequest, APIResponse
from recipe_ai.schemas.enums import EnhancementKind, ProviderStatus
from recipe_ai.schemas.generation import EnhancementFeedback
from recipe_ai.schemas.recipe import Recipe


class EnhanceRecipeRequest(APIRequest):
    """Body of POST /recipes/enhance."""

    recipe: Recipe
    enhancement: EnhancementKind
    feedback: EnhancementFeedback | None = None


class SuggestionsResponse(APIResponse):
    """Recipe title suggestions."""

    suggestions: list[str]


class HealthResponse(APIResponse):
    """Health check response model."""

    status: str = Field(..., examples=["healthy"])
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str
    environment: str


class ReadinessResponse(HealthResponse):
    """Readiness check response with dependency status."""

    provider_status: ProviderStatus
    dependencies: dict[str, str] = Field(default_factory=dict)
