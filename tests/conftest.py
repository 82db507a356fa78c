"""Shared test fixtures for the recipe AI service tests.

Provides a controllable clock, in-memory storage and sample requests and
recipes used across the unit test modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_ai.llm.parsing import parse_recipe
from recipe_ai.schemas.generation import GenerationRequest
from recipe_ai.storage.memory import MemoryStore
from tests.fixtures.llm_responses import STIR_FRY_RECIPE_JSON


if TYPE_CHECKING:
    from recipe_ai.schemas.recipe import Recipe


class FakeClock:
    """Manually advanced time source in seconds."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at an arbitrary fixed instant."""
    return FakeClock()


@pytest.fixture
def memory_store(clock: FakeClock) -> MemoryStore:
    """In-memory store driven by the fake clock."""
    return MemoryStore(clock=clock)


@pytest.fixture
def chicken_request() -> GenerationRequest:
    """Request whose pantry matches the canned stir-fry recipe."""
    return GenerationRequest(
        ingredients=[
            {"name": "chicken", "category": "protein"},
            {"name": "rice", "category": "grains"},
            {"name": "broccoli", "category": "vegetables"},
        ],
        cuisine="asian",
        servings=2,
    )


@pytest.fixture
def stir_fry_recipe() -> Recipe:
    """Canned provider recipe that passes the quality gate."""
    return parse_recipe(STIR_FRY_RECIPE_JSON)
