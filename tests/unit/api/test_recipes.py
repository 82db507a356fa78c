"""Unit tests for recipe endpoints.

Tests cover:
- Generate endpoint result mapping and source header
- Enhance endpoint error mapping
- Suggestions, usage and cache endpoints
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Response

from recipe_ai.api.v1.endpoints.recipes import (
    clear_cache,
    enhance_recipe,
    generate_recipe,
    get_usage,
    suggest_recipes,
)
from recipe_ai.core.exceptions import (
    BadGatewayException,
    RateLimitException,
    ServiceUnavailableException,
)
from recipe_ai.schemas.api import EnhanceRecipeRequest
from recipe_ai.schemas.enums import EnhancementKind, FailureKind, ProviderStatus
from recipe_ai.schemas.generation import GenerationResult, UsageMetadata, UsageStats


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import GenerationRequest
    from recipe_ai.schemas.recipe import Recipe


pytestmark = pytest.mark.unit


@pytest.fixture
def mock_service() -> MagicMock:
    service = MagicMock()
    service.generate_recipe = AsyncMock()
    service.enhance_recipe = AsyncMock()
    service.suggest_recipes = AsyncMock()
    service.get_usage_stats = AsyncMock()
    service.clear_cache = AsyncMock(return_value=3)
    return service


class TestGenerateRecipe:
    """Tests for generate_recipe endpoint."""

    async def test_returns_result_with_source_header(
        self,
        mock_service: MagicMock,
        chicken_request: GenerationRequest,
        stir_fry_recipe: Recipe,
    ) -> None:
        """Should return the result and expose where the recipe came from."""
        expected = GenerationResult(
            success=True,
            recipe=stir_fry_recipe,
            metadata=UsageMetadata(model="claude-sonnet-4-20250514", provider="anthropic"),
        )
        mock_service.generate_recipe.return_value = expected
        response = Response()

        result = await generate_recipe(chicken_request, mock_service, "alice", response)

        assert result is expected
        assert response.headers["X-Recipe-Source"] == "anthropic"
        mock_service.generate_recipe.assert_awaited_once_with(chicken_request, "alice")

    async def test_admission_denied_raises_rate_limit(
        self, mock_service: MagicMock, chicken_request: GenerationRequest
    ) -> None:
        """Should map ADMISSION_DENIED to a 429."""
        mock_service.generate_recipe.return_value = GenerationResult.failed(
            FailureKind.ADMISSION_DENIED, "Rate limit exceeded. Please try again later."
        )

        with pytest.raises(RateLimitException) as exc_info:
            await generate_recipe(chicken_request, mock_service, "alice", Response())

        assert exc_info.value.status_code == 429
        assert exc_info.value.message == "Rate limit exceeded. Please try again later."

    async def test_fallback_unavailable_raises_503(
        self, mock_service: MagicMock, chicken_request: GenerationRequest
    ) -> None:
        """Should map other failures to a 503."""
        mock_service.generate_recipe.return_value = GenerationResult.failed(
            FailureKind.FALLBACK_UNAVAILABLE, "fallback is disabled"
        )

        with pytest.raises(ServiceUnavailableException) as exc_info:
            await generate_recipe(chicken_request, mock_service, "alice", Response())

        assert exc_info.value.status_code == 503


class TestEnhanceRecipe:
    """Tests for enhance_recipe endpoint."""

    async def test_returns_enhanced_recipe(
        self, mock_service: MagicMock, stir_fry_recipe: Recipe
    ) -> None:
        """Should pass recipe, kind and feedback to the service."""
        expected = GenerationResult(success=True, recipe=stir_fry_recipe)
        mock_service.enhance_recipe.return_value = expected
        body = EnhanceRecipeRequest(
            recipe=stir_fry_recipe,
            enhancement=EnhancementKind.ADD_TIPS,
        )

        result = await enhance_recipe(body, mock_service)

        assert result is expected
        mock_service.enhance_recipe.assert_awaited_once_with(
            stir_fry_recipe, "add-tips", None
        )

    async def test_no_provider_raises_503(
        self, mock_service: MagicMock, stir_fry_recipe: Recipe
    ) -> None:
        """Should map PROVIDER_UNAVAILABLE to a 503."""
        mock_service.enhance_recipe.return_value = GenerationResult.failed(
            FailureKind.PROVIDER_UNAVAILABLE, "needs a provider"
        )
        body = EnhanceRecipeRequest(
            recipe=stir_fry_recipe, enhancement=EnhancementKind.ADD_TIPS
        )

        with pytest.raises(ServiceUnavailableException):
            await enhance_recipe(body, mock_service)

    async def test_provider_failure_raises_502(
        self, mock_service: MagicMock, stir_fry_recipe: Recipe
    ) -> None:
        """Should map provider failures to a 502."""
        mock_service.enhance_recipe.return_value = GenerationResult.failed(
            FailureKind.PARSE_ERROR, "No JSON object found in response"
        )
        body = EnhanceRecipeRequest(
            recipe=stir_fry_recipe, enhancement=EnhancementKind.OPTIMIZE_NUTRITION
        )

        with pytest.raises(BadGatewayException) as exc_info:
            await enhance_recipe(body, mock_service)

        assert exc_info.value.message == "No JSON object found in response"


class TestOtherEndpoints:
    """Tests for suggestions, usage and cache endpoints."""

    async def test_suggestions(self, mock_service: MagicMock) -> None:
        """Should wrap the titles in a response."""
        mock_service.suggest_recipes.return_value = ["Thai Basil Chicken"]

        result = await suggest_recipes(mock_service, cuisine="thai", mood=None)

        assert result.suggestions == ["Thai Basil Chicken"]
        mock_service.suggest_recipes.assert_awaited_once_with(cuisine="thai", mood=None)

    async def test_usage(self, mock_service: MagicMock) -> None:
        """Should return the caller's stats."""
        stats = UsageStats(
            remaining_requests=7,
            provider_status=ProviderStatus.ACTIVE,
            cache_enabled=True,
            ai_enabled=True,
        )
        mock_service.get_usage_stats.return_value = stats

        result = await get_usage(mock_service, "alice")

        assert result is stats
        mock_service.get_usage_stats.assert_awaited_once_with("alice")

    async def test_clear_cache(self, mock_service: MagicMock) -> None:
        """Should clear the cache and answer 204."""
        result = await clear_cache(mock_service)

        assert result.status_code == 204
        mock_service.clear_cache.assert_awaited_once()
