"""Tool Dispatch - explicit routing from tool_id to its pure formula.

Invariants:
    - Every tool_id -> formula mapping is visible in FORMULAS (no getattr magic)
    - Unknown or inactive tool ids raise ToolNotFoundError
    - A registered tool without a formula gets the "not implemented" result, never an exception
    - A formula crash (including overflow on huge inputs) or a non-finite value
      becomes CalculationError (logged, not swallowed)
    - execute() is deterministic: same input + same tables -> equal result

Design Decisions:
    - Explicit dict over if-chain: adding a tool is a registration, not a branch edit
    - Reference tables injected at construction: corrected figures need no formula change
"""

import logging
import math
from typing import Any, Callable, Mapping

from lifeformula.core.calc_result import CalculationResult, not_implemented_result
from lifeformula.core.errors import CalculationError, ToolNotFoundError
from lifeformula.core.formulas_finance import (
    breakup_cost,
    car_vs_uber,
    escape_taipei,
    food_expense_shocker,
    housing_index,
    moonlight_index,
    noodle_survival,
)
from lifeformula.core.formulas_lifestyle import (
    aging_simulation,
    birthday_collision,
    gaming_addiction,
    laziness_index,
    phone_lifespan,
)
from lifeformula.core.reference_tables import DEFAULT_TABLES, ReferenceTables
from lifeformula.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)

Formula = Callable[[dict, ReferenceTables], CalculationResult]

# Every mapping explicit: a new tool needs a catalog row and an entry here
FORMULAS: Mapping[str, Formula] = {
    # Calculators (8)
    "moonlight-calculator": moonlight_index,
    "noodle-survival": noodle_survival,
    "breakup-cost": breakup_cost,
    "escape-taipei": escape_taipei,
    "phone-lifespan": phone_lifespan,
    "car-vs-uber": car_vs_uber,
    "birthday-collision": birthday_collision,
    "housing-index": housing_index,

    # Quizzes and simulators (4)
    "lazy-index-test": laziness_index,
    "gaming-addiction-calculator": gaming_addiction,
    "aging-simulator": aging_simulation,
    "food-expense-shocker": food_expense_shocker,
}


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_has_non_finite(v) for v in value)
    return False


class CalculationDispatcher:
    """Routes tool_id -> formula. Explicit registration, no auto-discovery."""

    def __init__(
        self,
        registry: ToolRegistry,
        tables: ReferenceTables = DEFAULT_TABLES,
        formulas: Mapping[str, Formula] | None = None,
    ):
        self._registry = registry
        self._tables = tables
        self._formulas: dict[str, Formula] = dict(FORMULAS if formulas is None else formulas)

    def register(self, tool_id: str, formula: Formula) -> None:
        self._formulas[tool_id] = formula

    def has_formula(self, tool_id: str) -> bool:
        return tool_id in self._formulas

    def execute(self, tool_id: str, validated_input: dict) -> CalculationResult:
        """Run the formula for tool_id on input that already passed validation."""
        definition = self._registry.get_tool(tool_id)
        if definition is None or not definition.is_active:
            raise ToolNotFoundError(tool_id)

        formula = self._formulas.get(tool_id)
        if formula is None:
            logger.warning(
                f"No formula registered for '{tool_id}', returning placeholder result",
                extra={"tool_id": tool_id},
            )
            return not_implemented_result(validated_input)

        try:
            result = formula(validated_input, self._tables)
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.error(
                f"Formula '{tool_id}' failed on validated input: {e!r}",
                extra={"tool_id": tool_id, "error_code": "CALCULATION_ERROR"},
                exc_info=True,
            )
            raise CalculationError(tool_id, f"{type(e).__name__}: {e}") from e

        if _has_non_finite(result.value) or _has_non_finite(result.details):
            logger.error(
                f"Formula '{tool_id}' produced a non-finite number",
                extra={"tool_id": tool_id, "error_code": "CALCULATION_ERROR"},
            )
            raise CalculationError(tool_id, "formula produced a non-finite number")
        return result
