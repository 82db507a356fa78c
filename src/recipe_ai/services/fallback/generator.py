"""Deterministic local recipe generator.

Used whenever the hosted provider is absent, fails or produces an
unacceptable recipe. The same request always yields the same recipe, so its
output can be trusted without quality assessment.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import orjson

from recipe_ai.observability.logging import get_logger
from recipe_ai.schemas.recipe import (
    DietaryInfo,
    InstructionStep,
    NutritionInfo,
    Recipe,
    RecipeIngredient,
    RecipeVariation,
)
from recipe_ai.services.fallback import constants as c


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import GenerationPreferences, IngredientInput


logger = get_logger(__name__)


@runtime_checkable
class FallbackGenerator(Protocol):
    """Trusted local recipe source; assumed to always produce a recipe."""

    async def generate(
        self,
        ingredients: list[IngredientInput],
        cuisine: str,
        servings: int,
        preferences: GenerationPreferences | None,
    ) -> Recipe: ...


def _contains_any(name: str, keywords: tuple[str, ...]) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in keywords)


def _category(ingredient: IngredientInput) -> str:
    if ingredient.category:
        category = ingredient.category.lower()
        return category[:-1] if category.endswith("s") else category
    if _contains_any(ingredient.name, c.PROTEIN_KEYWORDS):
        return "protein"
    if _contains_any(ingredient.name, c.DAIRY_KEYWORDS):
        return "dairy"
    if _contains_any(ingredient.name, c.GRAIN_KEYWORDS):
        return "grain"
    return "vegetable"


class TemplateRecipeGenerator:
    """Builds a bowl-style recipe from the available ingredients.

    The recipe is adapted to the cook's experience level, spice preference
    and time budget, and carries estimated nutrition and dietary flags.
    """

    async def generate(
        self,
        ingredients: list[IngredientInput],
        cuisine: str,
        servings: int,
        preferences: GenerationPreferences | None,
    ) -> Recipe:
        experience = (
            (preferences.experience_level or "intermediate").lower()
            if preferences
            else "intermediate"
        )
        by_category: dict[str, list[IngredientInput]] = {}
        for ingredient in ingredients:
            by_category.setdefault(_category(ingredient), []).append(ingredient)

        proteins = by_category.get("protein", [])
        vegetables = by_category.get("vegetable", [])
        main = (proteins or vegetables or ingredients or [None])[0]
        main_name = main.name if main is not None else "mixed ingredients"
        cuisine_label = "Fusion" if cuisine == "any" else cuisine.title()

        recipe_ingredients = self._ingredients(ingredients, servings)
        instructions = self._instructions(
            main_name,
            cuisine_label,
            experience,
            has_protein=bool(proteins),
            mild=bool(preferences and preferences.spice_level == "mild"),
        )
        prep_time, cook_time = self._times(preferences)

        recipe = Recipe(
            id=self._recipe_id(ingredients, cuisine, servings, preferences),
            title=f"Creative {main_name.title()} {cuisine_label} Bowl",
            description="A personalized dish crafted from your unique ingredient combination",
            cuisine=cuisine,
            servings=servings,
            prep_time=prep_time,
            cook_time=cook_time,
            total_time=prep_time + cook_time,
            difficulty=self._difficulty(ingredients, experience),
            ingredients=recipe_ingredients,
            instructions=instructions,
            nutrition_info=self._nutrition(recipe_ingredients, servings),
            dietary_info=self._dietary(ingredients, preferences),
            tips=self._tips(ingredients, bool(proteins), len(vegetables)),
            tags=["creative", "pantry-friendly", "customizable", "quick"],
            variations=self._variations(ingredients),
        )
        logger.debug("Fallback recipe generated", recipe_id=recipe.id, title=recipe.title)
        return recipe

    @staticmethod
    def _recipe_id(
        ingredients: list[IngredientInput],
        cuisine: str,
        servings: int,
        preferences: GenerationPreferences | None,
    ) -> str:
        payload = {
            "ingredients": sorted(ingredient.name for ingredient in ingredients),
            "cuisine": cuisine,
            "servings": servings,
            "preferences": (
                preferences.model_dump(mode="json", exclude_defaults=True)
                if preferences
                else {}
            ),
        }
        digest = hashlib.sha256(orjson.dumps(payload, option=orjson.OPT_SORT_KEYS))
        return f"fallback-{digest.hexdigest()[:16]}"

    @staticmethod
    def _ingredients(
        ingredients: list[IngredientInput], servings: int
    ) -> list[RecipeIngredient]:
        scale = servings / c.BASE_SERVINGS
        result = []
        for index, ingredient in enumerate(ingredients[: c.MAX_RECIPE_INGREDIENTS]):
            substitutes = next(
                (
                    options
                    for key, options in c.SUBSTITUTES.items()
                    if key in ingredient.name.lower()
                ),
                [],
            )
            result.append(
                RecipeIngredient(
                    name=ingredient.name,
                    amount=round(scale, 2),
                    unit="portion",
                    optional=index > c.OPTIONAL_AFTER_INDEX,
                    substitutes=list(substitutes),
                )
            )
        return result

    @staticmethod
    def _instructions(
        main_name: str,
        cuisine_label: str,
        experience: str,
        *,
        has_protein: bool,
        mild: bool,
    ) -> list[InstructionStep]:
        if experience == "beginner":
            steps = list(c.BEGINNER_STEPS)
        else:
            steps = list(c.STANDARD_STEPS)
            if has_protein:
                steps.insert(1, c.PROTEIN_REST_STEP)
            if experience == "expert":
                if has_protein:
                    steps.insert(3, c.EXPERT_SEAR_STEP)
                steps.append(c.EXPERT_FINISH_STEP)

        result = []
        for number, (template, minutes) in enumerate(steps, start=1):
            text = template.format(main=main_name, cuisine=cuisine_label.lower())
            if mild:
                text = text.replace("generously", "lightly").replace("plenty of", "a little")
            result.append(InstructionStep(step=number, instruction=text, duration=minutes))
        return result

    @staticmethod
    def _times(preferences: GenerationPreferences | None) -> tuple[int, int]:
        prep, cook = c.DEFAULT_PREP_TIME, c.DEFAULT_COOK_TIME
        max_time = preferences.max_time if preferences else None
        if max_time and prep + cook > max_time:
            prep = max(max_time // 3, 1)
            cook = max(max_time - prep, 0)
        return prep, cook

    @staticmethod
    def _difficulty(ingredients: list[IngredientInput], experience: str) -> str:
        if experience == "beginner":
            return "Easy"
        complexity = 0.0
        for ingredient in ingredients:
            category = _category(ingredient)
            if category == "protein" and _contains_any(ingredient.name, ("fish", "salmon")):
                complexity += 3
            elif category == "protein":
                complexity += 2
            elif category == "spice":
                complexity += 1
            elif category == "herb":
                complexity += 0.5
        if complexity <= 6:
            return "Easy"
        if complexity <= 12:
            return "Medium"
        return "Hard"

    @staticmethod
    def _nutrition(ingredients: list[RecipeIngredient], servings: int) -> NutritionInfo:
        protein = carbs = fat = fiber = 0.0
        for ingredient in ingredients:
            portions = ingredient.amount * c.BASE_SERVINGS
            if _contains_any(ingredient.name, c.PROTEIN_KEYWORDS):
                protein += portions * 20
                fat += portions * 6
            elif _contains_any(ingredient.name, c.GRAIN_KEYWORDS):
                carbs += portions * 35
                fiber += portions * 2
            elif _contains_any(ingredient.name, c.DAIRY_KEYWORDS):
                protein += portions * 5
                fat += portions * 8
            else:
                carbs += portions * 8
                fiber += portions * 3

        per_serving = 1 / max(servings, 1)
        protein, carbs, fat, fiber = (
            round(value * per_serving, 1) for value in (protein, carbs, fat, fiber)
        )
        calories = round(protein * 4 + carbs * 4 + fat * 9)
        return NutritionInfo(
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
            fiber=fiber,
        )

    @staticmethod
    def _dietary(
        ingredients: list[IngredientInput],
        preferences: GenerationPreferences | None,
    ) -> DietaryInfo:
        names = [ingredient.name for ingredient in ingredients]
        has_animal = any(_contains_any(name, c.ANIMAL_KEYWORDS) for name in names)
        has_dairy = any(_contains_any(name, c.DAIRY_KEYWORDS) for name in names)
        has_egg = any("egg" in name.lower() for name in names)
        has_grain = any(_contains_any(name, c.GRAIN_KEYWORDS) for name in names)
        has_gluten = any(_contains_any(name, c.GLUTEN_KEYWORDS) for name in names)

        allergens = []
        if has_gluten:
            allergens.append("gluten")
        if has_dairy:
            allergens.append("dairy")
        if has_egg:
            allergens.append("eggs")
        if preferences:
            allergens = [a for a in allergens if a not in preferences.allergens]

        return DietaryInfo(
            is_vegetarian=not has_animal,
            is_vegan=not (has_animal or has_dairy or has_egg),
            is_gluten_free=not has_gluten,
            is_dairy_free=not has_dairy,
            is_keto=not has_grain and has_animal,
            is_paleo=not (has_grain or has_dairy),
            allergens=allergens,
        )

    @staticmethod
    def _tips(
        ingredients: list[IngredientInput], has_protein: bool, vegetable_count: int
    ) -> list[str]:
        tips = []
        if has_protein:
            tips.append("Let meat rest for 5-10 minutes after cooking for juicier results")
        if vegetable_count > 3:
            tips.append("Cut vegetables uniformly for even cooking")
        if any(_contains_any(i.name, c.SPICY_KEYWORDS) for i in ingredients):
            tips.append("Taste as you go and adjust spice levels to your preference")
        tips.append("Prep all ingredients before you start cooking (mise en place)")
        return tips

    @staticmethod
    def _variations(ingredients: list[IngredientInput]) -> list[RecipeVariation]:
        variations = []
        if any(_contains_any(i.name, c.DAIRY_KEYWORDS) for i in ingredients):
            variations.append(
                RecipeVariation(
                    name="Vegan Version",
                    description="Plant-based alternative using your available ingredients",
                    modifications=[
                        "Replace dairy with plant-based alternatives",
                        "Use nutritional yeast for cheesy flavor",
                    ],
                )
            )
        if any(_category(i) == "spice" for i in ingredients):
            variations.append(
                RecipeVariation(
                    name="Spiced Up",
                    description="Enhanced with your available spices",
                    modifications=[
                        "Add extra spices during cooking",
                        "Create a spice blend for deeper flavor",
                    ],
                )
            )
        return variations
