"""Boundary Protocols - contracts between the core engine and its IO collaborators.

Invariants:
    - Core NEVER imports from infrastructure; implementations are injected
    - Every boundary method is async because implementations do IO
    - The engine treats these calls as opaque: no retries, ordinary propagation

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from dataclasses import dataclass
from typing import Any, Protocol

from lifeformula.core.tool_definition import ToolDefinition


@dataclass(frozen=True)
class UsageDecision:
    """Answer from the usage gate. remaining/limit are None for unlimited users."""
    allowed: bool
    remaining: int | None = None
    limit: int | None = None


class ToolConfigSource(Protocol):
    """System of record for tool definitions."""
    async def get_all_active_tool_definitions(self) -> list[ToolDefinition]: ...


class UsageGate(Protocol):
    """Decides whether a user may run another tool today."""
    async def can_execute(self, user_ref: str) -> UsageDecision: ...


class UsageRecorder(Protocol):
    """Persists one tool run. Best-effort from the engine's point of view."""
    async def record(
        self, user_ref: str, tool_id: str,
        input_data: dict[str, Any], result: dict[str, Any],
    ) -> None: ...
