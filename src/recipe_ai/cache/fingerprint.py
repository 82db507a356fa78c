"""Request fingerprinting for the recipe cache."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Any

import orjson


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import GenerationRequest


def canonical_payload(request: GenerationRequest) -> dict[str, Any]:
    """Build the order-independent view of a request that identifies it.

    Ingredient names are sorted but otherwise compared exactly. Preferences
    drop unset fields, so an absent preference bag and an empty one agree.
    """
    preferences: dict[str, Any] = {}
    if request.preferences is not None:
        preferences = request.preferences.model_dump(
            mode="json", by_alias=False, exclude_defaults=True
        )
    return {
        "ingredients": sorted(request.ingredient_names),
        "cuisine": request.cuisine,
        "servings": request.servings,
        "preferences": preferences,
    }


def fingerprint(request: GenerationRequest) -> str:
    """Return the SHA-256 hex digest of the request's canonical JSON."""
    canonical = orjson.dumps(canonical_payload(request), option=orjson.OPT_SORT_KEYS)
    return hashlib.sha256(canonical).hexdigest()
