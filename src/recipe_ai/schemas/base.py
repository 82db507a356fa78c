"""Base schema configuration for all Pydantic models.

This module provides centralized base classes with consistent configuration.

Usage:
    - APIRequest: For incoming request bodies (generation requests)
    - APIResponse: For outgoing response bodies (results, stats, scores)
    - DownstreamResponse: For payloads produced by external providers (recipes)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        use_enum_values=True,
        validate_default=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming request schemas.

    Extra fields are ignored - clients may send properties we don't
    recognize, and that's okay.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing response schemas.

    Extra fields are forbidden - we only return properties that are
    explicitly defined in the schema.
    """

    model_config = ConfigDict(
        extra="forbid",
    )


class DownstreamResponse(_BaseSchema):
    """Base class for payloads received from generation providers.

    Extra fields are ignored - providers routinely add properties we
    did not ask for, and that must not break parsing.
    """

    model_config = ConfigDict(
        extra="ignore",
    )
