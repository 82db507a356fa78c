"""Generation request, result and accounting schemas."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from recipe_ai.schemas.base import APIRequest, APIResponse
from recipe_ai.schemas.enums import FailureKind, ProviderStatus
from recipe_ai.schemas.recipe import Recipe


# =============================================================================
# Requests
# =============================================================================


class IngredientInput(APIRequest):
    """An available ingredient supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    quantity: str | None = None
    category: str | None = Field(
        default=None,
        description="protein, vegetables, grains, dairy, spices, herbs, oils...",
    )
    expiry_date: date | None = None


class GenerationPreferences(APIRequest):
    """Optional preference bag; unknown keys are kept as free-form context."""

    model_config = ConfigDict(frozen=True, extra="allow")

    max_time: int | None = Field(default=None, ge=1, description="Minutes")
    difficulty: str | None = None
    dietary: list[str] = Field(default_factory=list)
    spice_level: str | None = None
    experience_level: str | None = None
    allergens: list[str] = Field(default_factory=list)
    nutrition_goals: str | None = None
    context: str | None = Field(default=None, description="Free-form context")


class GenerationRequest(APIRequest):
    """Immutable recipe generation request."""

    model_config = ConfigDict(frozen=True)

    ingredients: list[IngredientInput] = Field(default_factory=list)
    cuisine: str = Field(default="any", min_length=1)
    servings: int = Field(default=4, ge=1, le=100)
    preferences: GenerationPreferences | None = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def _wrap_plain_names(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [{"name": item} if isinstance(item, str) else item for item in value]

    @property
    def ingredient_names(self) -> list[str]:
        return [ingredient.name for ingredient in self.ingredients]

    @property
    def max_time(self) -> int | None:
        return self.preferences.max_time if self.preferences else None


class EnhancementFeedback(APIRequest):
    """User feedback that steers an enhancement."""

    rating: int = Field(..., ge=1, le=5)
    comments: list[str] = Field(default_factory=list)
    modifications: list[str] = Field(default_factory=list)


# =============================================================================
# Results
# =============================================================================


class TokenUsage(APIResponse):
    """Token counts reported by a provider."""

    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


class UsageMetadata(APIResponse):
    """Where a recipe came from and what it cost."""

    model: str
    provider: str
    response_time_ms: int = Field(default=0, ge=0)
    cache_hit: bool = False
    tokens: TokenUsage | None = None
    cost_estimate: float | None = Field(default=None, description="US cents")


class GenerationResult(APIResponse):
    """Uniform result of every generation path."""

    success: bool
    recipe: Recipe | None = None
    error: str | None = None
    failure: FailureKind | None = Field(
        default=None, description="Set when success is false"
    )
    fallback_reason: FailureKind | None = Field(
        default=None, description="Why the fallback generator served this recipe"
    )
    metadata: UsageMetadata | None = None

    @classmethod
    def failed(
        cls,
        failure: FailureKind,
        error: str,
        metadata: UsageMetadata | None = None,
    ) -> GenerationResult:
        return cls(success=False, failure=failure, error=error, metadata=metadata)


class QualityFactors(APIResponse):
    """Per-factor quality breakdown, each in [0, 1]."""

    ingredient_utilization: float
    instruction_clarity: float
    nutritional_balance: float
    creativity: float
    feasibility: float


class QualityScore(APIResponse):
    """Composite quality assessment of a provider recipe."""

    score: float = Field(..., ge=0, le=1)
    factors: QualityFactors
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    accepted: bool


class UsageStats(APIResponse):
    """Caller-facing generation budget and service mode."""

    remaining_requests: int
    provider_status: ProviderStatus
    cache_enabled: bool
    ai_enabled: bool
