"""Result Normalization - wraps a raw CalculationResult into the API-facing envelope.

Invariants:
    - normalize() is PURE: no persistence, no clock reads (timestamp comes from context)
    - Output shape is identical for every tool; callers never branch on tool_id
    - input_data is echoed as an equal deep copy: the caller's mapping is never mutated

Design Decisions:
    - ShareSettings passed in rather than read from config: keeps core free of settings
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from lifeformula.core.calc_result import CalculationResult
from lifeformula.core.tool_definition import ToolDefinition


@dataclass(frozen=True)
class ShareSettings:
    base_url: str = "https://twlifeformula.zeabur.app"
    hashtag: str = "台灣人生算式"


@dataclass(frozen=True)
class ExecutionContext:
    """Caller-supplied metadata for one tool run."""
    input_data: dict[str, Any]
    user_ref: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ToolExecutionOutput:
    tool_id: str
    tool_name: str
    input_data: dict[str, Any]
    result: CalculationResult
    timestamp: datetime
    share_config: dict[str, Any]
    user_ref: str | None = None

    def to_dict(self) -> dict:
        return {
            "tool_id": self.tool_id,
            "tool_name": self.tool_name,
            "input_data": self.input_data,
            "result": self.result.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "share_config": self.share_config,
        }


def build_share_config(
    definition: ToolDefinition, result: CalculationResult, share: ShareSettings,
) -> dict[str, Any]:
    """Title/hashtags/url for social sharing. Pure string templating."""
    return {
        "title": f"我的{definition.display_name}結果是 {result.value}{result.unit or ''}！",
        "description": result.description,
        "hashtags": [
            tag for tag in (share.hashtag, definition.category, result.level) if tag
        ],
        "url": f"{share.base_url.rstrip('/')}?tool={definition.id}",
    }


def normalize(
    definition: ToolDefinition,
    result: CalculationResult,
    context: ExecutionContext,
    share: ShareSettings = ShareSettings(),
) -> ToolExecutionOutput:
    return ToolExecutionOutput(
        tool_id=definition.id,
        tool_name=definition.display_name,
        input_data=copy.deepcopy(context.input_data),
        result=result,
        timestamp=context.timestamp,
        share_config=build_share_config(definition, result, share),
        user_ref=context.user_ref,
    )
