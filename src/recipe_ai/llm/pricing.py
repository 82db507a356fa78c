"""Per-provider, per-model token pricing.

Rates are US dollars per million tokens; costs are returned in US cents.
"""

from __future__ import annotations

from typing import Final, NamedTuple


class TokenRate(NamedTuple):
    input_per_million: float
    output_per_million: float


CENTS_PER_DOLLAR: Final[int] = 100
TOKENS_PER_MILLION: Final[int] = 1_000_000

# Rough chars-per-token ratio and typical recipe answer length, for estimates.
CHARS_PER_TOKEN: Final[int] = 4
EXPECTED_OUTPUT_TOKENS: Final[int] = 700

RATE_TABLE: Final[dict[str, dict[str, TokenRate]]] = {
    "anthropic": {
        "claude-opus-4-20250514": TokenRate(15.0, 75.0),
        "claude-sonnet-4-20250514": TokenRate(3.0, 15.0),
        "claude-3-5-haiku-20241022": TokenRate(0.8, 4.0),
        "claude-3-opus-20240229": TokenRate(15.0, 75.0),
        "claude-3-sonnet-20240229": TokenRate(3.0, 15.0),
        "claude-3-haiku-20240307": TokenRate(0.25, 1.25),
    },
    "groq": {
        "llama-3.1-8b-instant": TokenRate(0.05, 0.08),
        "llama-3.3-70b-versatile": TokenRate(0.59, 0.79),
    },
}

# Unknown models are priced like the provider's mid-tier model.
DEFAULT_RATES: Final[dict[str, TokenRate]] = {
    "anthropic": TokenRate(3.0, 15.0),
    "groq": TokenRate(0.59, 0.79),
}


def rate_for(provider: str, model: str) -> TokenRate:
    """Look up the rate of a model, falling back to the provider default."""
    models = RATE_TABLE.get(provider, {})
    if model in models:
        return models[model]
    return DEFAULT_RATES.get(provider, TokenRate(0.0, 0.0))


def calculate_cost(
    provider: str,
    model: str,
    prompt_tokens: int,
    completion_tokens: int,
) -> float:
    """Return the cost of a call in US cents."""
    rate = rate_for(provider, model)
    dollars = (
        prompt_tokens * rate.input_per_million
        + completion_tokens * rate.output_per_million
    ) / TOKENS_PER_MILLION
    return dollars * CENTS_PER_DOLLAR


def estimate_prompt_tokens(prompt: str) -> int:
    """Approximate token count of a prompt (ceil of chars / 4)."""
    return -(-len(prompt) // CHARS_PER_TOKEN)


def estimate_cost(provider: str, model: str, prompt: str) -> float:
    """Estimate the cost in US cents of generating a recipe for a prompt."""
    return calculate_cost(
        provider,
        model,
        estimate_prompt_tokens(prompt),
        EXPECTED_OUTPUT_TOKENS,
    )
