"""Application lifecycle events."""

from recipe_ai.core.events.lifespan import lifespan


__all__ = ["lifespan"]
