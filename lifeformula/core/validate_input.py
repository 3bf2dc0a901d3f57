"""Schema Validation - pure validation of an input mapping against a tool's input_schema.

Invariants:
    - validate() is PURE: never mutates the input or the schema, no hidden state
    - Fields are checked in declaration order and ALL errors are accumulated
    - A missing required field yields exactly one error and skips its other checks
    - Each violated bound yields its own message (min and max may both fire)
    - NaN/Infinity never pass numeric coercion

Design Decisions:
    - Returns ValidationResult instead of raising: the executor decides whether a
      failed validation becomes a ValidationError, tests assert on the list directly
    - coerce_numbers() is separate from validate(): validation reports, coercion
      produces the dict the formulas read
"""

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from lifeformula.core.domain_types import FieldType
from lifeformula.core.tool_definition import FieldSpec


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def to_number(value: Any) -> float | int | None:
    """Coerce a raw input value to a finite number, or None if impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if number.is_integer() and "." not in value and "e" not in value.lower():
            number = int(number)
    else:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def format_number(value: float | int) -> str:
    """Render bounds without a spurious trailing .0 (0 not 0.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _check_number(label: str, value: Any, spec: FieldSpec) -> list[str]:
    number = to_number(value)
    if number is None:
        return [f"{label} must be a number"]
    errors = []
    if spec.min is not None and number < spec.min:
        errors.append(f"{label} must be at least {format_number(spec.min)}")
    if spec.max is not None and number > spec.max:
        errors.append(f"{label} must be at most {format_number(spec.max)}")
    return errors


def _check_options(label: str, value: Any, spec: FieldSpec) -> list[str]:
    if spec.options is None or value in spec.options:
        return []
    return [f"{label} must be one of: {', '.join(spec.options)}"]


def validate(
    input_schema: Mapping[str, FieldSpec], input_values: Mapping[str, Any],
) -> ValidationResult:
    """Validate input_values against input_schema, collecting every error."""
    errors: list[str] = []
    for name, spec in input_schema.items():
        label = spec.display_label(name)
        value = input_values.get(name)

        if _is_absent(value):
            if spec.required:
                errors.append(f"{label} is required")
            continue

        if spec.type == FieldType.NUMBER.value:
            errors.extend(_check_number(label, value, spec))
        elif spec.type == FieldType.STRING.value:
            errors.extend(_check_options(label, value, spec))

    return ValidationResult(is_valid=not errors, errors=errors)


def coerce_numbers(
    input_schema: Mapping[str, FieldSpec], input_values: Mapping[str, Any],
) -> dict[str, Any]:
    """Copy of input_values with number fields converted to int/float.

    Absent optional fields are dropped so formulas can rely on .get() defaults.
    Call only after validate() succeeded.
    """
    coerced = {}
    for name, value in input_values.items():
        spec = input_schema.get(name)
        if _is_absent(value):
            continue
        if spec is not None and spec.type == FieldType.NUMBER.value:
            coerced[name] = to_number(value)
        else:
            coerced[name] = value
    return coerced
