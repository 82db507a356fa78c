"""Prompt definitions."""

from recipe_ai.llm.prompts.base import BasePrompt
from recipe_ai.llm.prompts.enhancement import RecipeEnhancementPrompt
from recipe_ai.llm.prompts.recipe_generation import (
    DEFAULT_SYSTEM_PROMPT,
    RecipeGenerationPrompt,
)
from recipe_ai.llm.prompts.recipe_schema import (
    BOOKKEEPING_DEFAULTS,
    RECIPE_SCHEMA_EXAMPLE,
    REQUIRED_RECIPE_FIELDS,
)
from recipe_ai.llm.prompts.suggestions import RecipeSuggestionPrompt


__all__ = [
    "BOOKKEEPING_DEFAULTS",
    "DEFAULT_SYSTEM_PROMPT",
    "RECIPE_SCHEMA_EXAMPLE",
    "REQUIRED_RECIPE_FIELDS",
    "BasePrompt",
    "RecipeEnhancementPrompt",
    "RecipeGenerationPrompt",
    "RecipeSuggestionPrompt",
]
