"""Constants for the recipe generation orchestrator.

Contains:
- Caller-facing error messages
- Metadata stamped on cache hits and fallback recipes
- Default suggestion lists
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Error Messages
# =============================================================================

RATE_LIMIT_MESSAGE: Final[str] = "Rate limit exceeded. Please try again later."
FALLBACK_DISABLED_MESSAGE: Final[str] = "Recipe generation failed and fallback is disabled"
ENHANCEMENT_UNAVAILABLE_MESSAGE: Final[str] = "AI enhancement requires an active AI provider"


# =============================================================================
# Result Metadata
# =============================================================================

CACHE_MODEL: Final[str] = "cached"
CACHE_PROVIDER: Final[str] = "cache"

FALLBACK_MODEL: Final[str] = "template-engine"
FALLBACK_PROVIDER: Final[str] = "fallback"
FALLBACK_RESPONSE_TIME_MS: Final[int] = 100


# =============================================================================
# Suggestions
# =============================================================================

OFFLINE_SUGGESTIONS: Final[tuple[str, ...]] = (
    "Creamy Garlic Parmesan Pasta",
    "Asian-Style Stir-Fry Bowl",
    "Mediterranean Herb-Crusted Salmon",
)
FAILED_SUGGESTIONS: Final[tuple[str, ...]] = (
    "Creative Fusion Bowl",
    "Seasonal Comfort Food",
    "Quick & Healthy Option",
)
