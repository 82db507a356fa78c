"""Quality assessment of provider-generated recipes."""

from recipe_ai.services.quality.assessor import QualityAssessor


__all__ = ["QualityAssessor"]
