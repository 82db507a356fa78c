"""Prompts that drive recipe generation.

The default system instruction embeds the shared recipe schema; the user
prompt is assembled from sections describing the pantry, the requirements,
the cook's experience and any hard constraints.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Final

from recipe_ai.llm.prompts.base import BasePrompt
from recipe_ai.llm.prompts.recipe_schema import render_schema


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import (
        GenerationPreferences,
        GenerationRequest,
        IngredientInput,
    )


EXPIRING_SOON_DAYS: Final[int] = 3

INGREDIENT_CATEGORIES: Final[tuple[str, ...]] = (
    "proteins",
    "vegetables",
    "fruits",
    "grains",
    "dairy",
    "spices",
    "herbs",
    "oils",
    "pantry",
    "other",
)

DEFAULT_SYSTEM_PROMPT: Final[str] = f"""\
You are a professional chef and culinary expert specializing in creating \
personalized recipes. Your task is to generate detailed, practical recipes \
based on available ingredients and user preferences.

IMPORTANT: You must respond with a valid JSON object that matches this exact schema:

{render_schema()}

Guidelines:
- Create recipes that are practical and achievable
- Use ingredients efficiently and suggest substitutions when appropriate
- Adapt complexity based on experience level (beginner = simpler steps)
- Include accurate nutritional estimates
- Provide helpful cooking tips
- Ensure instructions are clear and detailed
- Consider dietary restrictions and preferences
- Make recipes that taste great and are satisfying"""

EXPERIENCE_GUIDES: Final[dict[str, str]] = {
    "beginner": """\
EXPERIENCE LEVEL: Beginner Cook
- Use simple, clear instructions with basic cooking terms
- Include helpful tips for common mistakes
- Suggest easy techniques and minimal equipment
- Provide visual cues for doneness (color, texture, etc.)
- Keep ingredient list manageable (5-8 main ingredients)""",
    "intermediate": """\
EXPERIENCE LEVEL: Intermediate Cook
- Can use standard cooking techniques and terminology
- Comfortable with multiple cooking methods
- Can manage timing for multiple components
- Understands basic flavor combinations""",
    "advanced": """\
EXPERIENCE LEVEL: Advanced Cook
- Appreciates complex flavors and techniques
- Comfortable with professional cooking methods
- Can adapt recipes and make substitutions
- Enjoys challenging preparations""",
    "expert": """\
EXPERIENCE LEVEL: Expert/Professional Cook
- Expects sophisticated techniques and flavor profiles
- Comfortable with advanced equipment and methods
- Appreciates nuanced instructions and professional tips
- Can handle complex multi-step preparations""",
}

OUTPUT_FORMAT_SECTION: Final[str] = """\
OUTPUT FORMAT:
Please respond with ONLY a valid JSON object that matches the recipe schema. \
No additional text or explanation outside the JSON.

Ensure:
- All ingredients have realistic amounts and proper units
- Instructions are numbered and include estimated duration
- Nutritional information is accurate and realistic
- Dietary info correctly reflects the ingredients used
- Tips are practical and helpful"""

_NUTRITION_CONSTRAINTS: Final[dict[str, str]] = {
    "high-protein": "Aim for at least 25g protein per serving",
    "low-carb": "Keep carbohydrates under 20g per serving",
    "low-calorie": "Keep calories under 400 per serving while maintaining satisfaction",
}

_SPICE_CONSTRAINTS: Final[dict[str, str]] = {
    "mild": "Keep spices mild and gentle - suitable for sensitive palates",
    "extra-hot": "Make it spicy! Use bold, hot flavors for heat lovers",
}


def _expires_soon(ingredient: IngredientInput, today: date) -> bool:
    if ingredient.expiry_date is None:
        return False
    return (ingredient.expiry_date - today).days <= EXPIRING_SOON_DAYS


def build_ingredient_section(
    ingredients: list[IngredientInput],
    today: date,
) -> str:
    if not ingredients:
        return (
            "AVAILABLE INGREDIENTS: None specified - please create a simple "
            "recipe with common pantry ingredients."
        )

    grouped: dict[str, list[IngredientInput]] = {name: [] for name in INGREDIENT_CATEGORIES}
    for ingredient in ingredients:
        category = (ingredient.category or "other").lower()
        if category not in grouped and f"{category}s" in grouped:
            category = f"{category}s"
        grouped.get(category, grouped["other"]).append(ingredient)

    lines = ["AVAILABLE INGREDIENTS:"]
    for category, items in grouped.items():
        if not items:
            continue
        lines.append(f"{category.upper()}:")
        for item in items:
            details = []
            if item.quantity:
                details.append(f"Quantity: {item.quantity}")
            if _expires_soon(item, today):
                details.append("Expires soon")
            suffix = f" ({', '.join(details)})" if details else ""
            lines.append(f"- {item.name}{suffix}")

    lines.append(
        "\nPRIORITY: Please prioritize using ingredients that are expiring soon. "
        "Try to use as many available ingredients as possible while creating a "
        "delicious, cohesive recipe."
    )
    return "\n".join(lines)


def build_requirements_section(
    cuisine: str,
    servings: int,
    preferences: GenerationPreferences | None,
) -> str:
    cuisine_line = "Any cuisine (be creative!)" if cuisine == "any" else cuisine
    lines = [
        "RECIPE REQUIREMENTS:",
        f"- Cuisine: {cuisine_line}",
        f"- Servings: {servings}",
    ]
    if preferences is None:
        return "\n".join(lines)

    if preferences.max_time:
        lines.append(f"- Maximum total time: {preferences.max_time} minutes")
    if preferences.difficulty:
        lines.append(f"- Difficulty level: {preferences.difficulty}")
    if preferences.spice_level:
        lines.append(f"- Spice level: {preferences.spice_level}")
    if preferences.dietary:
        lines.append(f"- Dietary restrictions: {', '.join(preferences.dietary)}")
    if preferences.allergens:
        lines.append(f"- Allergens to avoid: {', '.join(preferences.allergens)}")
    if preferences.nutrition_goals:
        lines.append(f"- Nutrition goal: {preferences.nutrition_goals}")
    if preferences.context:
        lines.append(f"- Context: {preferences.context}")
    for key, value in (preferences.model_extra or {}).items():
        lines.append(f"- {key}: {value}")
    return "\n".join(lines)


def build_experience_section(experience_level: str | None) -> str:
    level = (experience_level or "intermediate").lower()
    return EXPERIENCE_GUIDES.get(level, EXPERIENCE_GUIDES["intermediate"])


def build_constraints_section(preferences: GenerationPreferences | None) -> str:
    if preferences is None:
        return ""

    constraints = []
    if preferences.max_time:
        constraints.append(
            f"Total cooking time must not exceed {preferences.max_time} minutes"
        )
    if preferences.spice_level in _SPICE_CONSTRAINTS:
        constraints.append(_SPICE_CONSTRAINTS[preferences.spice_level])
    if preferences.nutrition_goals in _NUTRITION_CONSTRAINTS:
        constraints.append(_NUTRITION_CONSTRAINTS[preferences.nutrition_goals])

    if not constraints:
        return ""
    return "IMPORTANT CONSTRAINTS:\n" + "\n".join(f"- {c}" for c in constraints)


class RecipeGenerationPrompt(BasePrompt):
    """Prompt for generating a recipe from a GenerationRequest."""

    temperature = 0.7
    max_tokens = 2000
    timeout_ms = 30_000

    def format(self, **kwargs: Any) -> str:
        """Format the generation prompt.

        Args:
            request: The GenerationRequest to describe.
            today: Reference date for expiry markers (defaults to today).

        Returns:
            Sections joined by blank lines; empty sections are skipped.
        """
        request: GenerationRequest = kwargs["request"]
        today: date = kwargs.get("today") or date.today()
        preferences = request.preferences

        sections = [
            build_ingredient_section(request.ingredients, today),
            build_requirements_section(request.cuisine, request.servings, preferences),
            build_experience_section(
                preferences.experience_level if preferences else None
            ),
            build_constraints_section(preferences),
            OUTPUT_FORMAT_SECTION,
        ]
        return "\n\n".join(section for section in sections if section)
