"""Local fallback recipe generation."""

from recipe_ai.services.fallback.generator import FallbackGenerator, TemplateRecipeGenerator


__all__ = ["FallbackGenerator", "TemplateRecipeGenerator"]
