"""Schema Validation - tests for validate(), to_number() and coerce_numbers().

Tests cover:
    - Valid input passes; missing required field reported once
    - Every error accumulated in schema declaration order
    - min/max bounds (both fire when min > max), option lists, non-numeric and non-finite values
    - Labels used in messages when present
    - Purity: inputs never mutated, repeated calls give equal results
    - Number coercion keeps integers as int and drops absent values
"""

import copy

from lifeformula.core.tool_definition import FieldSpec
from lifeformula.core.validate_input import (
    coerce_numbers,
    format_number,
    to_number,
    validate,
)


def _money_schema() -> dict[str, FieldSpec]:
    return {
        "salary": FieldSpec(type="number", required=True, min=0),
        "expenses": FieldSpec(type="number", required=True, min=0),
    }


def test_valid_input_passes():
    result = validate(_money_schema(), {"salary": 50000, "expenses": 45000})
    assert result.is_valid is True
    assert result.errors == []


def test_missing_required_field_is_reported():
    result = validate(_money_schema(), {"salary": 50000})
    assert result.is_valid is False
    assert result.errors == ["expenses is required"]


def test_empty_string_counts_as_missing():
    result = validate(_money_schema(), {"salary": 50000, "expenses": ""})
    assert result.errors == ["expenses is required"]


def test_errors_accumulate_in_declaration_order():
    result = validate(_money_schema(), {"expenses": -5})
    assert result.errors == [
        "salary is required",
        "expenses must be at least 0",
    ]


def test_label_used_in_messages():
    schema = {"age": FieldSpec(type="number", label="年齡", min=15, max=100)}
    result = validate(schema, {"age": 120})
    assert result.errors == ["年齡 must be at most 100"]


def test_optional_field_may_be_absent():
    schema = {"age": FieldSpec(type="number", min=15, max=100)}
    assert validate(schema, {}).is_valid is True


def test_non_numeric_value_rejected():
    result = validate(_money_schema(), {"salary": "abc", "expenses": 1})
    assert result.errors == ["salary must be a number"]


def test_numeric_string_accepted():
    result = validate(_money_schema(), {"salary": "50000", "expenses": " 45000.5 "})
    assert result.is_valid is True


def test_bool_is_not_a_number():
    result = validate(_money_schema(), {"salary": True, "expenses": 1})
    assert result.errors == ["salary must be a number"]


def test_nan_and_infinity_rejected():
    result = validate(_money_schema(), {"salary": "nan", "expenses": float("inf")})
    assert result.errors == [
        "salary must be a number",
        "expenses must be a number",
    ]


def test_option_outside_list_rejected():
    schema = {
        "city": FieldSpec(type="string", required=True, options=("台北市", "新北市")),
    }
    result = validate(schema, {"city": "火星"})
    assert result.errors == ["city must be one of: 台北市, 新北市"]


def test_validate_is_pure_and_deterministic():
    schema = _money_schema()
    values = {"salary": "50000"}
    before = copy.deepcopy(values)
    first = validate(schema, values)
    second = validate(schema, values)
    assert values == before
    assert first == second


def test_to_number():
    assert to_number("42") == 42 and isinstance(to_number("42"), int)
    assert to_number("4.5") == 4.5
    assert to_number("1e3") == 1000.0
    assert to_number(7) == 7
    assert to_number("") is None
    assert to_number(None) is None
    assert to_number(False) is None
    assert to_number("inf") is None


def test_format_number_drops_trailing_zero():
    assert format_number(0.0) == "0"
    assert format_number(2.5) == "2.5"


def test_coerce_numbers_converts_and_drops_absent():
    schema = {
        "salary": FieldSpec(type="number", required=True),
        "expenses": FieldSpec(type="number", required=True),
        "age": FieldSpec(type="number"),
        "location": FieldSpec(type="string"),
    }
    coerced = coerce_numbers(
        schema,
        {"salary": "50000", "expenses": "4500.5", "age": "", "location": "台北市"},
    )
    assert coerced == {"salary": 50000, "expenses": 4500.5, "location": "台北市"}
    assert isinstance(coerced["salary"], int)


def test_inverted_bounds_report_both_errors():
    schema = {"score": FieldSpec(type="number", min=10, max=5)}
    result = validate(schema, {"score": 7})
    assert result.errors == [
        "score must be at least 10",
        "score must be at most 5",
    ]
