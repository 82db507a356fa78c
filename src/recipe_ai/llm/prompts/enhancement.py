"""Prompt for improving an existing recipe."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from recipe_ai.llm.prompts.base import BasePrompt
from recipe_ai.schemas.enums import EnhancementKind


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import EnhancementFeedback
    from recipe_ai.schemas.recipe import Recipe


ENHANCEMENT_INSTRUCTIONS: Final[dict[EnhancementKind, str]] = {
    EnhancementKind.ADD_TIPS: """\
ENHANCEMENT REQUEST: Add 3-5 professional cooking tips that will help users achieve better results. Focus on:
- Technique improvements
- Common mistakes to avoid
- Ingredient handling tips
- Timing and temperature guidance
- Presentation suggestions

Return the enhanced recipe with a new "tips" array containing these professional insights.""",
    EnhancementKind.CREATE_VARIATIONS: """\
ENHANCEMENT REQUEST: Create 2-3 creative variations of this recipe. Consider:
- Different protein options
- Seasonal ingredient swaps
- Dietary modifications (vegan, gluten-free, etc.)
- Regional/cultural adaptations
- Difficulty level adjustments

Return the enhanced recipe with a new "variations" array containing these alternatives.""",
    EnhancementKind.IMPROVE_INSTRUCTIONS: """\
ENHANCEMENT REQUEST: Improve the cooking instructions to be more detailed and beginner-friendly. Focus on:
- Adding timing details for each step
- Including temperature specifications
- Clarifying cooking techniques
- Adding visual cues for doneness
- Breaking down complex steps

Return the recipe with enhanced "instructions" array.""",
    EnhancementKind.OPTIMIZE_NUTRITION: """\
ENHANCEMENT REQUEST: Optimize this recipe for better nutritional balance. Consider:
- Increasing protein content
- Adding more vegetables/fiber
- Reducing sodium or sugar
- Improving healthy fat ratios
- Maintaining great taste

Return the recipe with optimized ingredients and updated nutritional information.""",
}


def _format_amount(amount: float) -> str:
    return str(int(amount)) if float(amount).is_integer() else f"{amount:g}"


class RecipeEnhancementPrompt(BasePrompt):
    """Prompt asking the provider to return an improved version of a recipe."""

    temperature = 0.5
    max_tokens = 1500
    timeout_ms = 30_000

    def format(self, **kwargs: Any) -> str:
        recipe: Recipe = kwargs["recipe"]
        enhancement = EnhancementKind(kwargs["enhancement"])
        feedback: EnhancementFeedback | None = kwargs.get("feedback")

        ingredient_lines = "\n".join(
            f"- {_format_amount(item.amount)} {item.unit} {item.name}".replace("  ", " ")
            for item in recipe.ingredients
        )
        instruction_lines = "\n".join(
            f"{step.step}. {step.instruction}" for step in recipe.instructions
        )

        parts = [
            f"Please enhance the following recipe by {enhancement.value.replace('-', ' ')}:",
            "",
            "ORIGINAL RECIPE:",
            f"Title: {recipe.title}",
            f"Description: {recipe.description}",
            f"Difficulty: {recipe.difficulty}",
            f"Cuisine: {recipe.cuisine}",
            "",
            "Ingredients:",
            ingredient_lines,
            "",
            "Instructions:",
            instruction_lines,
            "",
            ENHANCEMENT_INSTRUCTIONS[enhancement],
        ]

        if feedback is not None:
            parts.extend(
                [
                    "",
                    "USER FEEDBACK:",
                    f"Rating: {feedback.rating}/5 stars",
                    f"Comments: {', '.join(feedback.comments)}",
                    f"User Modifications: {', '.join(feedback.modifications)}",
                    "",
                    "Please consider this feedback when making enhancements.",
                ]
            )

        parts.extend(
            ["", "Respond with the complete enhanced recipe in the same JSON format."]
        )
        return "\n".join(parts)
