"""Unit tests for recipe extraction from completion text."""

from __future__ import annotations

import orjson
import pytest

from recipe_ai.llm.exceptions import LLMParseError
from recipe_ai.llm.parsing import (
    extract_json_array,
    extract_json_object,
    parse_recipe,
    parse_string_list,
)
from tests.fixtures.llm_responses import (
    NON_JSON_TEXT,
    STIR_FRY_RECIPE,
    STIR_FRY_RECIPE_JSON,
    WRAPPED_RECIPE_TEXT,
)


pytestmark = pytest.mark.unit


class TestExtractJsonObject:
    """Tests for balanced object extraction."""

    def test_plain_object(self) -> None:
        """Should return the whole object."""
        assert extract_json_object('{"a": 1}') == '{"a": 1}'

    def test_object_inside_prose(self) -> None:
        """Should ignore surrounding text."""
        assert extract_json_object('Sure! {"a": {"b": 2}} Enjoy.') == '{"a": {"b": 2}}'

    def test_braces_inside_strings(self) -> None:
        """Should not count braces that appear inside string literals."""
        text = 'Result: {"tip": "use {fresh} herbs", "note": "a \\"}\\" quote"} done'

        assert extract_json_object(text) == (
            '{"tip": "use {fresh} herbs", "note": "a \\"}\\" quote"}'
        )

    def test_first_object_wins(self) -> None:
        """Should return only the first balanced object."""
        assert extract_json_object('{"a": 1} and {"b": 2}') == '{"a": 1}'

    def test_no_object(self) -> None:
        """Should return None without braces."""
        assert extract_json_object(NON_JSON_TEXT) is None

    def test_unterminated_object(self) -> None:
        """Should return None when the object never closes."""
        assert extract_json_object('{"a": {"b": 1}') is None


class TestExtractJsonArray:
    """Tests for balanced array extraction."""

    def test_array_inside_prose(self) -> None:
        """Should return the first array."""
        assert extract_json_array('Ideas: ["a", "b"]!') == '["a", "b"]'

    def test_brackets_inside_strings(self) -> None:
        """Should ignore brackets in strings."""
        assert extract_json_array('["a [x]", "b"]') == '["a [x]", "b"]'


class TestParseRecipe:
    """Tests for parse_recipe function."""

    def test_parses_plain_json(self) -> None:
        """Should build a Recipe from camelCase JSON."""
        recipe = parse_recipe(STIR_FRY_RECIPE_JSON)

        assert recipe.title == STIR_FRY_RECIPE["title"]
        assert recipe.prep_time == 15
        assert recipe.nutrition_info is not None
        assert recipe.nutrition_info.calories == 520
        assert recipe.dietary_info.is_dairy_free is True
        assert len(recipe.instructions) == 4

    def test_parses_wrapped_json(self) -> None:
        """Should find the recipe inside prose and code fences."""
        recipe = parse_recipe(WRAPPED_RECIPE_TEXT)

        assert recipe.title == STIR_FRY_RECIPE["title"]

    def test_adds_bookkeeping_defaults(self) -> None:
        """Should fill id, rating, reviews and variations when absent."""
        recipe = parse_recipe(STIR_FRY_RECIPE_JSON)

        assert len(recipe.id) == 32
        assert recipe.rating == 4.5
        assert recipe.reviews == 0
        assert recipe.variations == []

    def test_ids_are_unique(self) -> None:
        """Should mint a fresh id per parse."""
        assert parse_recipe(STIR_FRY_RECIPE_JSON).id != parse_recipe(STIR_FRY_RECIPE_JSON).id

    def test_keeps_provider_bookkeeping(self) -> None:
        """Should not overwrite values the provider supplied."""
        data = {**STIR_FRY_RECIPE, "id": "abc", "rating": 3.0, "reviews": 12}

        recipe = parse_recipe(orjson.dumps(data).decode())

        assert recipe.id == "abc"
        assert recipe.rating == 3.0
        assert recipe.reviews == 12

    def test_accepts_plain_string_steps(self) -> None:
        """Should number bare instruction strings."""
        data = {**STIR_FRY_RECIPE, "instructions": ["Boil water", "Add pasta"]}

        recipe = parse_recipe(orjson.dumps(data).decode())

        assert [step.step for step in recipe.instructions] == [1, 2]
        assert recipe.instructions[1].instruction == "Add pasta"

    def test_derives_total_time(self) -> None:
        """Should sum prep and cook time when total is absent."""
        data = {key: value for key, value in STIR_FRY_RECIPE.items() if key != "totalTime"}

        recipe = parse_recipe(orjson.dumps(data).decode())

        assert recipe.total_time == 40

    def test_no_json(self) -> None:
        """Should raise when no object is present."""
        with pytest.raises(LLMParseError, match="No JSON object"):
            parse_recipe(NON_JSON_TEXT)

    def test_invalid_json(self) -> None:
        """Should raise when the object is not valid JSON."""
        with pytest.raises(LLMParseError, match="Invalid JSON"):
            parse_recipe("{title: 'unquoted'}")

    @pytest.mark.parametrize("field", ["title", "ingredients", "instructions"])
    def test_missing_required_field(self, field: str) -> None:
        """Should raise when a required field is missing."""
        data = {key: value for key, value in STIR_FRY_RECIPE.items() if key != field}

        with pytest.raises(LLMParseError, match=field):
            parse_recipe(orjson.dumps(data).decode())

    def test_empty_ingredients(self) -> None:
        """Should treat an empty ingredient list as missing."""
        data = {**STIR_FRY_RECIPE, "ingredients": []}

        with pytest.raises(LLMParseError, match="ingredients"):
            parse_recipe(orjson.dumps(data).decode())

    def test_schema_violation(self) -> None:
        """Should raise when fields have the wrong types."""
        data = {**STIR_FRY_RECIPE, "servings": "a crowd"}

        with pytest.raises(LLMParseError, match="validation"):
            parse_recipe(orjson.dumps(data).decode())


class TestParseStringList:
    """Tests for parse_string_list function."""

    def test_parses_array(self) -> None:
        """Should return the strings of the first array."""
        assert parse_string_list('Try these: ["A", "B", "C"]') == ["A", "B", "C"]

    def test_no_array(self) -> None:
        """Should raise without an array."""
        with pytest.raises(LLMParseError):
            parse_string_list("No ideas today")

    def test_non_string_items(self) -> None:
        """Should raise when items are not strings."""
        with pytest.raises(LLMParseError):
            parse_string_list("[1, 2, 3]")
