"""Recipe artifact schemas.

A Recipe is the structured payload produced either by a hosted provider or by
the local fallback generator. The wire form uses camelCase keys, matching the
JSON contract the providers are instructed to follow.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from recipe_ai.schemas.base import DownstreamResponse


class RecipeIngredient(DownstreamResponse):
    """An ingredient line of a recipe."""

    name: str = Field(..., min_length=1, description="Ingredient name")
    amount: float = Field(default=1.0, ge=0, description="Quantity in `unit`")
    unit: str = Field(default="", description="Measurement unit (cup, tbsp, piece...)")
    optional: bool = Field(default=False)
    substitutes: list[str] = Field(default_factory=list)


class InstructionStep(DownstreamResponse):
    """A single numbered cooking step."""

    step: int = Field(..., ge=1, description="1-based step number")
    instruction: str = Field(..., description="What to do in this step")
    duration: float | None = Field(default=None, ge=0, description="Minutes")
    temperature: float | None = Field(default=None, description="Degrees F")


class NutritionInfo(DownstreamResponse):
    """Per-serving nutrition estimate."""

    calories: float = Field(..., ge=0)
    protein: float = Field(default=0, ge=0, description="Grams")
    carbs: float = Field(default=0, ge=0, description="Grams")
    fat: float = Field(default=0, ge=0, description="Grams")
    fiber: float = Field(default=0, ge=0, description="Grams")
    sugar: float = Field(default=0, ge=0, description="Grams")
    sodium: float = Field(default=0, ge=0, description="Milligrams")
    cholesterol: float = Field(default=0, ge=0, description="Milligrams")


class DietaryInfo(DownstreamResponse):
    """Dietary flags for a recipe."""

    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    is_dairy_free: bool = False
    is_keto: bool = False
    is_paleo: bool = False
    allergens: list[str] = Field(default_factory=list)


class RecipeVariation(DownstreamResponse):
    """An alternative take on a recipe."""

    name: str
    description: str = ""
    modifications: list[str] = Field(default_factory=list)


class Recipe(DownstreamResponse):
    """A generated recipe."""

    id: str = Field(..., min_length=1, description="Bookkeeping identifier")
    title: str = Field(..., min_length=1)
    description: str = ""
    cuisine: str = ""
    servings: int = Field(default=1, ge=1)
    prep_time: int = Field(default=0, ge=0, description="Minutes")
    cook_time: int = Field(default=0, ge=0, description="Minutes")
    total_time: int = Field(default=0, ge=0, description="Minutes")
    difficulty: str = "Medium"
    ingredients: list[RecipeIngredient]
    instructions: list[InstructionStep]
    nutrition_info: NutritionInfo | None = None
    dietary_info: DietaryInfo = Field(default_factory=DietaryInfo)
    tips: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    variations: list[RecipeVariation] = Field(default_factory=list)
    rating: float | None = Field(default=None, ge=0, le=5)
    reviews: int | None = Field(default=None, ge=0)

    @field_validator("instructions", mode="before")
    @classmethod
    def _number_plain_steps(cls, value: Any) -> Any:
        """Accept bare strings as steps, numbering them in order."""
        if not isinstance(value, list):
            return value
        return [
            {"step": index, "instruction": item} if isinstance(item, str) else item
            for index, item in enumerate(value, start=1)
        ]

    @field_validator("ingredients", mode="before")
    @classmethod
    def _wrap_plain_ingredients(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [{"name": item} if isinstance(item, str) else item for item in value]

    @model_validator(mode="after")
    def _derive_total_time(self) -> Recipe:
        if self.total_time == 0 and (self.prep_time or self.cook_time):
            self.total_time = self.prep_time + self.cook_time
        return self
