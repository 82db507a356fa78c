"""Usage accounting."""

from recipe_ai.services.usage.tracker import CallerUsage, InMemoryUsageTracker, UsageTracker


__all__ = ["CallerUsage", "InMemoryUsageTracker", "UsageTracker"]
