"""Pydantic schemas for requests, recipes and results."""

from recipe_ai.schemas.api import (
    EnhanceRecipeRequest,
    HealthResponse,
    ReadinessResponse,
    SuggestionsResponse,
)
from recipe_ai.schemas.enums import EnhancementKind, FailureKind, ProviderStatus
from recipe_ai.schemas.generation import (
    EnhancementFeedback,
    GenerationPreferences,
    GenerationRequest,
    GenerationResult,
    IngredientInput,
    QualityFactors,
    QualityScore,
    TokenUsage,
    UsageMetadata,
    UsageStats,
)
from recipe_ai.schemas.recipe import (
    DietaryInfo,
    InstructionStep,
    NutritionInfo,
    Recipe,
    RecipeIngredient,
    RecipeVariation,
)


__all__ = [
    "DietaryInfo",
    "EnhanceRecipeRequest",
    "EnhancementFeedback",
    "EnhancementKind",
    "FailureKind",
    "GenerationPreferences",
    "GenerationRequest",
    "GenerationResult",
    "HealthResponse",
    "IngredientInput",
    "InstructionStep",
    "NutritionInfo",
    "ProviderStatus",
    "QualityFactors",
    "QualityScore",
    "Recipe",
    "RecipeIngredient",
    "ReadinessResponse",
    "RecipeVariation",
    "SuggestionsResponse",
    "TokenUsage",
    "UsageMetadata",
    "UsageStats",
]
