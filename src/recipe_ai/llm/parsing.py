"""Extraction of recipe objects from free-form completion text.

Models are told to answer with a single JSON object but routinely wrap it in
prose or code fences. The first balanced ``{...}`` span is taken, braces
inside string literals are ignored.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any

import orjson
from pydantic import ValidationError

from recipe_ai.llm.exceptions import LLMParseError
from recipe_ai.llm.prompts.recipe_schema import (
    BOOKKEEPING_DEFAULTS,
    REQUIRED_RECIPE_FIELDS,
)
from recipe_ai.schemas.recipe import Recipe


def _extract_balanced(text: str, opener: str, closer: str) -> str | None:
    start = text.find(opener)
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def extract_json_object(text: str) -> str | None:
    """Return the first balanced JSON object substring, or None."""
    return _extract_balanced(text, "{", "}")


def extract_json_array(text: str) -> str | None:
    """Return the first balanced JSON array substring, or None."""
    return _extract_balanced(text, "[", "]")


def parse_recipe(text: str) -> Recipe:
    """Parse completion text into a Recipe.

    Bookkeeping fields are added only where absent: a fresh uuid4 ``id``, then
    the rating, review count and variations defaults.

    Raises:
        LLMParseError: If no object is found, it is not valid JSON, a required
            field is missing, or the object does not validate as a Recipe.
    """
    candidate = extract_json_object(text)
    if candidate is None:
        msg = "No JSON object found in response"
        raise LLMParseError(msg)

    try:
        data = orjson.loads(candidate)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON in response: {e}"
        raise LLMParseError(msg) from e

    if not isinstance(data, dict):
        msg = "Response JSON is not an object"
        raise LLMParseError(msg)

    missing = [field for field in REQUIRED_RECIPE_FIELDS if not data.get(field)]
    if missing:
        msg = f"Recipe missing required fields: {', '.join(missing)}"
        raise LLMParseError(msg)

    payload: dict[str, Any] = dict(data)
    payload["id"] = str(payload.get("id") or uuid.uuid4().hex)
    for key, value in BOOKKEEPING_DEFAULTS.items():
        if payload.get(key) is None:
            payload[key] = copy.deepcopy(value)

    try:
        return Recipe.model_validate(payload)
    except ValidationError as e:
        msg = f"Recipe failed validation: {e.error_count()} error(s)"
        raise LLMParseError(msg) from e


def parse_string_list(text: str) -> list[str]:
    """Parse the first JSON array in text as a list of strings.

    Raises:
        LLMParseError: If no array of strings is found.
    """
    candidate = extract_json_array(text)
    if candidate is None:
        msg = "No JSON array found in response"
        raise LLMParseError(msg)
    try:
        data = orjson.loads(candidate)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON in response: {e}"
        raise LLMParseError(msg) from e
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        msg = "Response JSON is not a list of strings"
        raise LLMParseError(msg)
    return data
