"""Unit tests for the deterministic fallback recipe generator.

Tests cover:
- Determinism and identifiers
- Serving scaling and substitutes
- Experience, spice and time adaptations
- Nutrition and dietary estimates
"""

from __future__ import annotations

import pytest

from recipe_ai.schemas.generation import (
    GenerationPreferences,
    GenerationRequest,
    IngredientInput,
)
from recipe_ai.services.fallback import FallbackGenerator, TemplateRecipeGenerator
from recipe_ai.services.quality import QualityAssessor


pytestmark = pytest.mark.unit


def _ingredients(*names: str) -> list[IngredientInput]:
    return [IngredientInput(name=name) for name in names]


@pytest.fixture
def generator() -> TemplateRecipeGenerator:
    return TemplateRecipeGenerator()


class TestDeterminism:
    """Tests for reproducible output."""

    def test_satisfies_protocol(self, generator: TemplateRecipeGenerator) -> None:
        """Should implement the FallbackGenerator protocol."""
        assert isinstance(generator, FallbackGenerator)

    async def test_same_input_same_recipe(self, generator: TemplateRecipeGenerator) -> None:
        """Should produce identical recipes for identical requests."""
        first = await generator.generate(_ingredients("chicken", "rice"), "thai", 2, None)
        second = await generator.generate(_ingredients("chicken", "rice"), "thai", 2, None)

        assert first == second
        assert first.id.startswith("fallback-")

    async def test_id_ignores_ingredient_order(
        self, generator: TemplateRecipeGenerator
    ) -> None:
        """Should derive the same id regardless of ingredient order."""
        first = await generator.generate(_ingredients("chicken", "rice"), "thai", 2, None)
        second = await generator.generate(_ingredients("rice", "chicken"), "thai", 2, None)

        assert first.id == second.id

    async def test_id_differs_by_request(self, generator: TemplateRecipeGenerator) -> None:
        """Should derive different ids for different requests."""
        thai = await generator.generate(_ingredients("chicken"), "thai", 2, None)
        mexican = await generator.generate(_ingredients("chicken"), "mexican", 2, None)

        assert thai.id != mexican.id


class TestRecipeShape:
    """Tests for the generated recipe content."""

    async def test_title_uses_main_protein(self, generator: TemplateRecipeGenerator) -> None:
        """Should build the title around the first protein."""
        recipe = await generator.generate(
            _ingredients("spinach", "salmon", "rice"), "japanese", 4, None
        )

        assert recipe.title == "Creative Salmon Japanese Bowl"
        assert "creative" in recipe.tags

    async def test_any_cuisine_is_fusion(self, generator: TemplateRecipeGenerator) -> None:
        """Should call an unspecified cuisine fusion."""
        recipe = await generator.generate(_ingredients("tofu"), "any", 4, None)

        assert recipe.title == "Creative Tofu Fusion Bowl"

    async def test_empty_pantry(self, generator: TemplateRecipeGenerator) -> None:
        """Should still produce a recipe without ingredients."""
        recipe = await generator.generate([], "any", 4, None)

        assert recipe.title == "Creative Mixed Ingredients Fusion Bowl"
        assert recipe.instructions

    async def test_scales_to_servings(self, generator: TemplateRecipeGenerator) -> None:
        """Should scale portions relative to four servings."""
        recipe = await generator.generate(_ingredients("chicken", "rice"), "any", 6, None)

        assert recipe.servings == 6
        assert all(item.amount == 1.5 for item in recipe.ingredients)
        assert all(item.unit == "portion" for item in recipe.ingredients)

    async def test_caps_ingredients_and_marks_optional(
        self, generator: TemplateRecipeGenerator
    ) -> None:
        """Should use at most eight ingredients, later ones optional."""
        names = [f"vegetable {index}" for index in range(10)]

        recipe = await generator.generate(_ingredients(*names), "any", 4, None)

        assert len(recipe.ingredients) == 8
        assert not recipe.ingredients[4].optional
        assert recipe.ingredients[5].optional

    async def test_substitutes(self, generator: TemplateRecipeGenerator) -> None:
        """Should suggest substitutes for common ingredients."""
        recipe = await generator.generate(_ingredients("butter"), "any", 4, None)

        assert "olive oil" in recipe.ingredients[0].substitutes

    async def test_passes_quality_gate(self, generator: TemplateRecipeGenerator) -> None:
        """Should produce balanced, creative recipes that would pass the gate."""
        request = GenerationRequest(ingredients=["chicken", "rice", "broccoli"])
        recipe = await generator.generate(
            request.ingredients, request.cuisine, request.servings, None
        )

        score = QualityAssessor().assess(recipe, request)

        assert score.factors.nutritional_balance == 1.0
        assert score.factors.creativity == 0.9
        assert score.accepted is True


class TestAdaptations:
    """Tests for preference-driven adaptations."""

    async def test_beginner_steps(self, generator: TemplateRecipeGenerator) -> None:
        """Should use simpler steps and Easy difficulty for beginners."""
        preferences = GenerationPreferences(experience_level="beginner")

        recipe = await generator.generate(
            _ingredients("salmon", "tuna", "shrimp", "beef"), "any", 4, preferences
        )

        assert len(recipe.instructions) == 7
        assert recipe.difficulty == "Easy"

    async def test_expert_protein_steps(self, generator: TemplateRecipeGenerator) -> None:
        """Should add resting, searing and finishing steps for experts."""
        preferences = GenerationPreferences(experience_level="expert")

        recipe = await generator.generate(_ingredients("beef"), "any", 4, preferences)

        texts = [step.instruction for step in recipe.instructions]
        assert len(texts) == 11
        assert texts[1].startswith("Season your protein")
        assert texts[3].startswith("Sear the protein")
        assert texts[-1].startswith("Finish off the heat")
        assert [step.step for step in recipe.instructions] == list(range(1, 12))

    async def test_mild_spice(self, generator: TemplateRecipeGenerator) -> None:
        """Should tone down seasoning language for mild preferences."""
        preferences = GenerationPreferences(spice_level="mild")

        recipe = await generator.generate(_ingredients("carrot"), "any", 4, preferences)

        texts = " ".join(step.instruction for step in recipe.instructions)
        assert "generously" not in texts
        assert "Season lightly" in texts

    async def test_respects_max_time(self, generator: TemplateRecipeGenerator) -> None:
        """Should shrink prep and cook time to fit the budget."""
        preferences = GenerationPreferences(max_time=30)

        recipe = await generator.generate(_ingredients("egg"), "any", 4, preferences)

        assert recipe.prep_time == 10
        assert recipe.cook_time == 20
        assert recipe.total_time == 30

    async def test_default_times(self, generator: TemplateRecipeGenerator) -> None:
        """Should use the default times without a budget."""
        recipe = await generator.generate(_ingredients("egg"), "any", 4, None)

        assert recipe.total_time == 40

    async def test_difficulty_grows_with_proteins(
        self, generator: TemplateRecipeGenerator
    ) -> None:
        """Should rate many proteins as harder."""
        recipe = await generator.generate(
            _ingredients("salmon", "tuna", "fish", "chicken", "beef"), "any", 4, None
        )

        assert recipe.difficulty == "Medium"


class TestEstimates:
    """Tests for nutrition and dietary estimates."""

    async def test_vegetarian_flags(self, generator: TemplateRecipeGenerator) -> None:
        """Should mark plant-only pantries vegetarian and vegan."""
        recipe = await generator.generate(_ingredients("tofu", "broccoli"), "any", 4, None)

        assert recipe.dietary_info.is_vegetarian is True
        assert recipe.dietary_info.is_vegan is True
        assert recipe.dietary_info.allergens == []

    async def test_allergens(self, generator: TemplateRecipeGenerator) -> None:
        """Should list gluten and dairy allergens."""
        recipe = await generator.generate(_ingredients("pasta", "cheese"), "any", 4, None)

        assert recipe.dietary_info.allergens == ["gluten", "dairy"]
        assert recipe.dietary_info.is_gluten_free is False
        assert [variation.name for variation in recipe.variations] == ["Vegan Version"]

    async def test_nutrition_is_per_serving(
        self, generator: TemplateRecipeGenerator
    ) -> None:
        """Should estimate per-serving macros whose calories add up."""
        recipe = await generator.generate(_ingredients("chicken"), "any", 4, None)

        nutrition = recipe.nutrition_info
        assert nutrition is not None
        assert nutrition.protein == 20
        assert nutrition.fat == 6
        assert nutrition.calories == 134
