"""Quality gate for provider-generated recipes.

The assessment is a pure function of the recipe and the request: five
weighted factors, a capped sum, and a fixed acceptance threshold. Fallback
recipes are never assessed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_ai.schemas.generation import QualityFactors, QualityScore
from recipe_ai.services.quality import constants as c


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import GenerationRequest
    from recipe_ai.schemas.recipe import Recipe


class QualityAssessor:
    """Scores provider recipes and decides whether they are acceptable.

    Args:
        threshold: Minimum score (inclusive) for acceptance.
    """

    def __init__(self, threshold: float = c.DEFAULT_ACCEPTANCE_THRESHOLD) -> None:
        self.threshold = threshold

    def assess(self, recipe: Recipe, request: GenerationRequest) -> QualityScore:
        issues: list[str] = []
        suggestions: list[str] = []

        factors = QualityFactors(
            ingredient_utilization=self._utilization(recipe, request, issues, suggestions),
            instruction_clarity=self._clarity(recipe, issues, suggestions),
            nutritional_balance=self._nutrition(recipe, issues),
            creativity=self._creativity(recipe),
            feasibility=self._feasibility(recipe, request, issues, suggestions),
        )

        weighted = (
            factors.ingredient_utilization * c.UTILIZATION_WEIGHT
            + factors.instruction_clarity * c.CLARITY_WEIGHT
            + factors.nutritional_balance * c.NUTRITION_WEIGHT
            + factors.creativity * c.CREATIVITY_WEIGHT
            + factors.feasibility * c.FEASIBILITY_WEIGHT
        )
        score = min(weighted, 1.0)

        return QualityScore(
            score=score,
            factors=factors,
            issues=issues,
            suggestions=suggestions,
            accepted=score >= self.threshold,
        )

    @staticmethod
    def _utilization(
        recipe: Recipe,
        request: GenerationRequest,
        issues: list[str],
        suggestions: list[str],
    ) -> float:
        available = [name.lower() for name in request.ingredient_names]
        used = [ingredient.name.lower() for ingredient in recipe.ingredients]

        matched = sum(
            1
            for name in used
            if any(name in other or other in name for other in available)
        )
        rate = matched / max(len(used), 1)

        if rate < c.LOW_UTILIZATION_RATE:
            issues.append(c.ISSUE_LOW_UTILIZATION)
            suggestions.append(c.SUGGEST_MORE_INGREDIENTS)
        return min(rate * c.UTILIZATION_BOOST, 1.0)

    @staticmethod
    def _clarity(recipe: Recipe, issues: list[str], suggestions: list[str]) -> float:
        steps = recipe.instructions
        mean_length = (
            sum(len(step.instruction) for step in steps) / len(steps) if steps else 0.0
        )

        if c.MIN_INSTRUCTION_LENGTH < mean_length < c.MAX_INSTRUCTION_LENGTH:
            return c.CLEAR_INSTRUCTIONS_SCORE

        if mean_length <= c.MIN_INSTRUCTION_LENGTH:
            issues.append(c.ISSUE_TOO_BRIEF)
            suggestions.append(c.SUGGEST_MORE_DETAIL)
        else:
            issues.append(c.ISSUE_TOO_VERBOSE)
            suggestions.append(c.SUGGEST_SHORTER_STEPS)
        return c.UNCLEAR_INSTRUCTIONS_SCORE

    @staticmethod
    def _nutrition(recipe: Recipe, issues: list[str]) -> float:
        nutrition = recipe.nutrition_info
        if nutrition is None:
            return c.DEFAULT_NUTRITION_SCORE

        explained = (
            nutrition.protein * 4 + nutrition.carbs * 4 + nutrition.fat * 9
        ) / max(nutrition.calories, 1)
        if abs(explained - 1) < c.MACRO_TOLERANCE:
            return c.BALANCED_NUTRITION_SCORE

        issues.append(c.ISSUE_UNBALANCED_MACROS)
        return c.DEFAULT_NUTRITION_SCORE

    @staticmethod
    def _creativity(recipe: Recipe) -> float:
        tags = {tag.lower() for tag in recipe.tags}
        if c.CREATIVE_TAG in tags or c.CREATIVE_TITLE_MARKER in recipe.title.lower():
            return c.CREATIVE_SCORE
        return c.DEFAULT_CREATIVITY_SCORE

    @staticmethod
    def _feasibility(
        recipe: Recipe,
        request: GenerationRequest,
        issues: list[str],
        suggestions: list[str],
    ) -> float:
        max_time = request.max_time or c.DEFAULT_MAX_TIME_MINUTES
        if recipe.total_time <= max_time:
            return c.FEASIBLE_SCORE

        issues.append(c.ISSUE_TOO_LONG)
        suggestions.append(c.SUGGEST_FASTER_METHOD)
        return c.INFEASIBLE_SCORE
