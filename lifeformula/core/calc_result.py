"""Calculation Results - the raw output shape every formula returns, plus shared helpers.

Invariants:
    - value is always present; numeric for real results, SENTINEL_VALUE otherwise
    - No formula result ever carries NaN or Infinity
    - round_half_up() is the single rounding rule (0.5 rounds away from zero)

Design Decisions:
    - Dataclass over dict: formulas get a checked constructor, the normalizer gets
      attribute access, to_dict() produces the wire shape
"""

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

SENTINEL_VALUE = "N/A"


@dataclass
class CalculationResult:
    value: int | float | str
    description: str
    suggestions: list[str] = field(default_factory=list)
    unit: str | None = None
    level: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def is_sentinel(self) -> bool:
        return self.value == SENTINEL_VALUE

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "unit": self.unit,
            "level": self.level,
            "description": self.description,
            "details": self.details,
            "suggestions": list(self.suggestions),
        }


def round_half_up(value: float, ndigits: int = 0) -> int | float:
    """Round like a calculator would: 2.5 -> 3, -2.5 -> -3."""
    factor = 10 ** ndigits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    rounded = math.copysign(rounded, value)
    if ndigits == 0:
        return int(rounded)
    return rounded


def thousands(value: float) -> str:
    """1234567 -> '1,234,567' (rounded half-up to an integer)."""
    return f"{round_half_up(value):,}"


def pick_band(value: float, bands: Sequence[tuple[float, Any]], default: Any) -> Any:
    """First band whose threshold value >= threshold; bands sorted high to low."""
    for threshold, outcome in bands:
        if value >= threshold:
            return outcome
    return default


def undefined_result(
    field_name: str, description: str, suggestions: list[str],
    unit: str | None = None, **details: Any,
) -> CalculationResult:
    """Sentinel result for a zero or missing caller-controlled denominator."""
    return CalculationResult(
        value=SENTINEL_VALUE,
        unit=unit,
        description=description,
        suggestions=list(suggestions),
        details={"reason": "zero_denominator", "field": field_name, **details},
    )


def not_implemented_result(input_data: dict[str, Any]) -> CalculationResult:
    """Fallback for a registered tool that has no formula yet."""
    return CalculationResult(
        value=SENTINEL_VALUE,
        description="此工具計算邏輯尚未實現",
        suggestions=[],
        details=dict(input_data),
    )
