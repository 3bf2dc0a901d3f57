"""Tool Definition - tests for FieldSpec/ToolDefinition and store-row parsing.

Tests cover:
    - Rows with JSON-encoded columns decode to typed definitions
    - Malformed rows (bad JSON, unknown category, bad field spec) raise ValueError
    - Default icon when the row has none
    - Public projection hides internal configuration
"""

import json

import pytest

from lifeformula.core.tool_definition import (
    DEFAULT_ICON,
    FieldSpec,
    ToolDefinition,
    parse_tool_row,
)


def _row(**overrides) -> dict:
    row = {
        "tool_type": "moonlight-calculator",
        "display_name": "月光族指數計算機",
        "description": "計算你的月光族指數",
        "category": "calculator",
        "icon": "💸",
        "input_schema": {"salary": {"type": "number", "required": True, "min": 0}},
        "calculation_logic": {"formula": "expenses / salary"},
        "monetization_config": {"ad_placement": ["result_page"]},
        "is_active": True,
    }
    row.update(overrides)
    return row


def test_parse_row_with_decoded_columns():
    definition = parse_tool_row(_row())
    assert definition.id == "moonlight-calculator"
    assert definition.category == "calculator"
    assert definition.input_schema["salary"].required is True
    assert definition.input_schema["salary"].min == 0


def test_parse_row_with_json_text_columns():
    definition = parse_tool_row(_row(
        input_schema=json.dumps({"salary": {"type": "number"}}),
        calculation_logic="{}",
        monetization_config=None,
    ))
    assert definition.input_schema["salary"].type == "number"
    assert definition.monetization_config == {}


def test_bad_json_column_raises():
    with pytest.raises(ValueError, match="input_schema"):
        parse_tool_row(_row(input_schema="{not json"))


def test_unknown_category_raises():
    with pytest.raises(ValueError):
        parse_tool_row(_row(category="weather"))


def test_missing_icon_falls_back_to_default():
    assert parse_tool_row(_row(icon=None)).icon == DEFAULT_ICON


def test_options_only_on_string_fields():
    with pytest.raises(ValueError):
        FieldSpec(type="number", options=("a", "b"))


def test_bounds_only_on_number_fields():
    with pytest.raises(ValueError):
        FieldSpec(type="string", min=1)


def test_definitions_are_immutable():
    definition = parse_tool_row(_row())
    with pytest.raises(ValueError):
        definition.display_name = "changed"


def test_public_projection():
    public = parse_tool_row(_row()).to_public()
    assert set(public) == {"id", "name", "description", "category", "icon", "input_schema"}
    assert public["name"] == "月光族指數計算機"
    assert public["input_schema"]["salary"] == {"type": "number", "required": True, "min": 0}


def test_tool_definition_defaults():
    definition = ToolDefinition(id="x", display_name="X", category="fun")
    assert definition.is_active is True
    assert definition.input_schema == {}
