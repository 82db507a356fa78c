"""Prompt for short lists of recipe ideas."""

from __future__ import annotations

from typing import Any

from recipe_ai.llm.prompts.base import BasePrompt


class RecipeSuggestionPrompt(BasePrompt):
    """Ask for three dish names as a JSON array of strings."""

    system_prompt = (
        "You are a creative chef. Respond with ONLY a JSON array of strings, "
        "no other text."
    )
    temperature = 0.9
    max_tokens = 500
    timeout_ms = 15_000

    def format(self, **kwargs: Any) -> str:
        cuisine: str | None = kwargs.get("cuisine")
        mood: str | None = kwargs.get("mood")

        scope = f" for {cuisine} cuisine" if cuisine and cuisine != "any" else ""
        theme = (
            f"MOOD/THEME: {mood}"
            if mood
            else "THEME: Surprise me with something creative and delicious"
        )
        return (
            f"Generate 3 creative recipe suggestions{scope}.\n\n"
            f"{theme}\n\n"
            'Return only the recipe names as a JSON array, e.g. ["Name 1", "Name 2", "Name 3"].'
        )
