"""Enumeration types shared across the generation layer."""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    """Why a generation attempt did not produce an accepted provider recipe.

    Only ADMISSION_DENIED and FALLBACK_UNAVAILABLE reach callers as failures;
    the others are absorbed by the fallback path and reported as the
    fallback reason.
    """

    ADMISSION_DENIED = "admission_denied"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    GENERATION_FAILED = "generation_failed"
    PARSE_ERROR = "parse_error"
    QUALITY_REJECTED = "quality_rejected"
    FALLBACK_UNAVAILABLE = "fallback_unavailable"


class EnhancementKind(StrEnum):
    """Supported recipe enhancement operations."""

    ADD_TIPS = "add-tips"
    CREATE_VARIATIONS = "create-variations"
    IMPROVE_INSTRUCTIONS = "improve-instructions"
    OPTIMIZE_NUTRITION = "optimize-nutrition"


class ProviderStatus(StrEnum):
    """Whether generation currently reaches a hosted provider."""

    ACTIVE = "active"
    FALLBACK = "fallback"
