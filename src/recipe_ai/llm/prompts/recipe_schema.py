"""Recipe JSON contract shared by the system prompt and the response parser.

Keeping the example object, the required keys and the bookkeeping defaults in
one place means the instructions sent to a provider and the checks applied to
its answer cannot drift apart.
"""

from __future__ import annotations

from typing import Any, Final

import orjson


RECIPE_SCHEMA_EXAMPLE: Final[dict[str, Any]] = {
    "title": "Recipe Name",
    "description": "Brief description of the dish",
    "cuisine": "cuisine_type",
    "servings": 4,
    "prepTime": 15,
    "cookTime": 25,
    "totalTime": 40,
    "difficulty": "Easy|Medium|Hard",
    "ingredients": [
        {
            "name": "ingredient name",
            "amount": 1,
            "unit": "cup|tbsp|tsp|piece|etc",
            "optional": False,
        }
    ],
    "instructions": [
        {
            "step": 1,
            "instruction": "Detailed cooking instruction",
            "duration": 5,
            "temperature": 350,
        }
    ],
    "nutritionInfo": {
        "calories": 450,
        "protein": 25,
        "carbs": 35,
        "fat": 18,
        "fiber": 5,
        "sugar": 8,
        "sodium": 650,
        "cholesterol": 75,
    },
    "dietaryInfo": {
        "isVegetarian": False,
        "isVegan": False,
        "isGlutenFree": False,
        "isDairyFree": False,
        "isKeto": False,
        "isPaleo": False,
        "allergens": ["gluten", "dairy"],
    },
    "tips": ["Helpful cooking tip", "Another useful tip"],
    "tags": ["quick", "healthy", "family-friendly"],
}

REQUIRED_RECIPE_FIELDS: Final[tuple[str, ...]] = ("title", "ingredients", "instructions")

# Filled in by the parser only when the provider left them out. A missing
# `id` gets a fresh uuid4 hex.
BOOKKEEPING_DEFAULTS: Final[dict[str, Any]] = {
    "rating": 4.5,
    "reviews": 0,
    "variations": [],
}


def render_schema() -> str:
    """Render the example object as indented JSON for prompt text."""
    return orjson.dumps(RECIPE_SCHEMA_EXAMPLE, option=orjson.OPT_INDENT_2).decode()
