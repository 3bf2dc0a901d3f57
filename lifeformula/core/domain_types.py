"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ToolId is the unique registry key (kebab-case, e.g. "noodle-survival")
    - All valid categorical states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# --- Identity Types ---------------------------------------------------------

ToolId = NewType("ToolId", str)
UserRef = NewType("UserRef", str)   # opaque external user identifier


# --- Enums ------------------------------------------------------------------

class FieldType(str, Enum):
    """Input field types understood by the schema validator."""
    NUMBER = "number"
    STRING = "string"


class ToolCategory(str, Enum):
    """Tool groupings for registry indexing and share hashtags."""
    CALCULATOR = "calculator"
    TEST = "test"
    SIMULATOR = "simulator"
    ANALYZER = "analyzer"
    FUN = "fun"


CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    ToolCategory.CALCULATOR.value: "計算機",
    ToolCategory.TEST.value: "測驗",
    ToolCategory.SIMULATOR.value: "模擬器",
    ToolCategory.ANALYZER.value: "分析器",
    ToolCategory.FUN.value: "趣味",
}


def category_display_name(category: str) -> str:
    """Human label for a category key; unknown keys fall back to the key itself."""
    return CATEGORY_DISPLAY_NAMES.get(category, category)
