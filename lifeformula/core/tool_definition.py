"""Tool Definitions - typed FieldSpec/ToolDefinition models and store-row deserialization.

Invariants:
    - ToolDefinition and FieldSpec are frozen once built
    - number fields never carry options; options imply a string field
    - min/max bounds only appear on number fields
    - input_schema preserves declaration order (validation order depends on it)
    - Raw store rows (JSON-as-string columns) are parsed HERE and nowhere else

Design Decisions:
    - Pydantic models at the boundary: the rest of the core only ever sees typed values,
      never strings that need ad hoc json.loads
    - to_public() is the single redaction point: calculation/monetization internals
      stay out of API listings
"""

import json
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lifeformula.core.domain_types import FieldType, ToolCategory

DEFAULT_ICON = "🧮"


class FieldSpec(BaseModel):
    """Declarative rules for one input field."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    type: FieldType
    required: bool = False
    label: str | None = None
    min: int | float | None = None
    max: int | float | None = None
    options: tuple[str, ...] | None = None

    @model_validator(mode="after")
    def check_type_constraints(self) -> "FieldSpec":
        if self.options is not None and self.type != FieldType.STRING.value:
            raise ValueError("options are only allowed on string fields")
        if (self.min is not None or self.max is not None) and (
            self.type != FieldType.NUMBER.value
        ):
            raise ValueError("min/max bounds are only allowed on number fields")
        return self

    def display_label(self, field_name: str) -> str:
        return self.label or field_name

    def to_public(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class ToolDefinition(BaseModel):
    """One registered tool: metadata + input schema + opaque internals."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(min_length=1)
    display_name: str
    description: str = ""
    category: ToolCategory
    icon: str = DEFAULT_ICON
    input_schema: dict[str, FieldSpec] = Field(default_factory=dict)
    calculation_logic: dict[str, Any] = Field(default_factory=dict)
    monetization_config: dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True

    def to_public(self) -> dict:
        """Redacted projection for API listings."""
        return {
            "id": self.id,
            "name": self.display_name,
            "description": self.description,
            "category": self.category,
            "icon": self.icon,
            "input_schema": {
                name: spec.to_public() for name, spec in self.input_schema.items()
            },
        }


def _decode_json_column(value: Any, column: str) -> Any:
    """Store columns may arrive JSON-encoded (MySQL/legacy rows) or already decoded."""
    if value is None:
        return {}
    if isinstance(value, (str, bytes)):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"column '{column}' is not valid JSON: {e}") from e
    return value


def parse_tool_row(row: Mapping[str, Any]) -> ToolDefinition:
    """Build a ToolDefinition from a raw configuration-store row.

    Accepts store column names (tool_type, display_name, input_schema, ...).
    Raises ValueError (pydantic.ValidationError is a subclass) on malformed rows.
    """
    return ToolDefinition(
        id=row["tool_type"],
        display_name=row["display_name"],
        description=row.get("description") or "",
        category=row["category"],
        icon=row.get("icon") or DEFAULT_ICON,
        input_schema=_decode_json_column(row.get("input_schema"), "input_schema"),
        calculation_logic=_decode_json_column(
            row.get("calculation_logic"), "calculation_logic",
        ),
        monetization_config=_decode_json_column(
            row.get("monetization_config"), "monetization_config",
        ),
        is_active=bool(row.get("is_active", True)),
    )
