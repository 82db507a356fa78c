"""Integration test fixtures.

Runs the real application, lifespan included, over an in-memory store with
the Anthropic Messages API replayed through respx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
import respx
from httpx import ASGITransport, AsyncClient

from recipe_ai.core.config import Settings
from recipe_ai.core.events import lifespan
from recipe_ai.factory import create_app
from tests.fixtures.llm_responses import STIR_FRY_RECIPE_JSON, create_anthropic_response


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Iterator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration

MESSAGES_URL = "https://api.anthropic.com/v1/messages"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for a small, fast deployment with Anthropic as provider."""
    return Settings(
        APP_ENV="test",
        ANTHROPIC_API_KEY="sk-ant-integration",
        storage={"backend": "memory"},
        observability={"metrics": {"enabled": False}},
        rate_limiting={"requests_per_minute": 2, "requests_per_hour": 100},
        llm={
            "enabled": True,
            "provider": "anthropic",
            "anthropic": {"max_retries": 0},
            "fallback": {"enabled": True},
        },
    )


@pytest.fixture
def anthropic_api() -> Iterator[respx.MockRouter]:
    """Mocked Anthropic API answering every call with the stir-fry recipe."""
    with respx.mock(assert_all_called=False) as router:
        router.post(MESSAGES_URL, name="messages").mock(
            return_value=httpx.Response(
                200, json=create_anthropic_response(STIR_FRY_RECIPE_JSON)
            )
        )
        yield router


@pytest.fixture
async def app(
    test_settings: Settings,
    anthropic_api: respx.MockRouter,
) -> AsyncGenerator[FastAPI]:
    """Application with its lifespan running."""
    application = create_app(test_settings)
    async with lifespan(application):
        yield application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
