"""Constants for recipe quality assessment.

Contains:
- Factor weights (sum to 1.0)
- Per-factor thresholds and scores
- Issue and suggestion messages
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Weights
# =============================================================================

UTILIZATION_WEIGHT: Final[float] = 0.30
CLARITY_WEIGHT: Final[float] = 0.25
NUTRITION_WEIGHT: Final[float] = 0.20
CREATIVITY_WEIGHT: Final[float] = 0.15
FEASIBILITY_WEIGHT: Final[float] = 0.10

DEFAULT_ACCEPTANCE_THRESHOLD: Final[float] = 0.6


# =============================================================================
# Factor Rules
# =============================================================================

UTILIZATION_BOOST: Final[float] = 1.2
LOW_UTILIZATION_RATE: Final[float] = 0.3

MIN_INSTRUCTION_LENGTH: Final[int] = 30
MAX_INSTRUCTION_LENGTH: Final[int] = 200
CLEAR_INSTRUCTIONS_SCORE: Final[float] = 1.0
UNCLEAR_INSTRUCTIONS_SCORE: Final[float] = 0.7

MACRO_TOLERANCE: Final[float] = 0.2
BALANCED_NUTRITION_SCORE: Final[float] = 1.0
DEFAULT_NUTRITION_SCORE: Final[float] = 0.8

CREATIVE_TAG: Final[str] = "creative"
CREATIVE_TITLE_MARKER: Final[str] = "fusion"
CREATIVE_SCORE: Final[float] = 0.9
DEFAULT_CREATIVITY_SCORE: Final[float] = 0.8

DEFAULT_MAX_TIME_MINUTES: Final[int] = 120
FEASIBLE_SCORE: Final[float] = 1.0
INFEASIBLE_SCORE: Final[float] = 0.6


# =============================================================================
# Messages
# =============================================================================

ISSUE_LOW_UTILIZATION: Final[str] = "Low ingredient utilization from available ingredients"
SUGGEST_MORE_INGREDIENTS: Final[str] = "Try to use more of the available ingredients"
ISSUE_TOO_BRIEF: Final[str] = "Instructions too brief"
ISSUE_TOO_VERBOSE: Final[str] = "Instructions too verbose"
SUGGEST_MORE_DETAIL: Final[str] = "Add more detail to each cooking step"
SUGGEST_SHORTER_STEPS: Final[str] = "Split long steps into shorter ones"
ISSUE_UNBALANCED_MACROS: Final[str] = "Macronutrients do not account for stated calories"
ISSUE_TOO_LONG: Final[str] = "Recipe exceeds the requested maximum time"
SUGGEST_FASTER_METHOD: Final[str] = "Use quicker cooking methods or fewer steps"
