"""Tool Executor - single entry point for running a tool end to end.

Invariants:
    - Order is fixed: lookup -> validate -> usage gate -> dispatch -> normalize -> record
    - A refused usage check raises before any calculation runs
    - Usage recording never changes the outcome: failures are logged, not propagated
    - The caller's input mapping is never mutated; the output echoes an equal copy

Design Decisions:
    - Gate and recorder are optional collaborators: without a database the engine
      runs every request and records nothing
    - Recording runs as a background task so the response does not wait on the store;
      drain() awaits pending records (shutdown, tests)
"""

import asyncio
import logging
from typing import Any, Mapping

from lifeformula.core.errors import (
    ErrorContext,
    ToolNotFoundError,
    UsageLimitExceededError,
    ValidationError,
)
from lifeformula.core.normalize_result import (
    ExecutionContext,
    ShareSettings,
    ToolExecutionOutput,
    normalize,
)
from lifeformula.core.repository_protocols import UsageGate, UsageRecorder
from lifeformula.core.validate_input import coerce_numbers, validate
from lifeformula.services.tool_dispatch import CalculationDispatcher
from lifeformula.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolExecutor:
    def __init__(
        self,
        registry: ToolRegistry,
        dispatcher: CalculationDispatcher,
        usage_gate: UsageGate | None = None,
        usage_recorder: UsageRecorder | None = None,
        share: ShareSettings = ShareSettings(),
    ):
        self._registry = registry
        self._dispatcher = dispatcher
        self._usage_gate = usage_gate
        self._usage_recorder = usage_recorder
        self._share = share
        self._pending: set[asyncio.Task] = set()

    async def execute(
        self,
        tool_id: str,
        input_data: Mapping[str, Any],
        user_ref: str | None = None,
    ) -> ToolExecutionOutput:
        """Validate, gate, calculate and wrap one tool run.

        Raises:
            ToolNotFoundError: unknown or inactive tool_id
            ValidationError: input fails the tool's schema (all messages attached)
            UsageLimitExceededError: usage gate refused user_ref
            CalculationError: formula failed on validated input
        """
        definition = self._registry.get_tool(tool_id)
        if definition is None or not definition.is_active:
            raise ToolNotFoundError(tool_id, ErrorContext(user_ref=user_ref))

        validation = validate(definition.input_schema, input_data)
        if not validation.is_valid:
            logger.info(
                f"Input rejected for '{tool_id}': {len(validation.errors)} error(s)",
                extra={"tool_id": tool_id, "error_code": "VALIDATION_ERROR"},
            )
            raise ValidationError(
                validation.errors, ErrorContext(tool_id=tool_id, user_ref=user_ref),
            )

        if user_ref and self._usage_gate is not None:
            decision = await self._usage_gate.can_execute(user_ref)
            if not decision.allowed:
                logger.info(
                    f"Usage limit reached for '{user_ref}'",
                    extra={"tool_id": tool_id, "user_ref": user_ref,
                           "error_code": "USAGE_LIMIT_EXCEEDED"},
                )
                raise UsageLimitExceededError(
                    decision.remaining, decision.limit,
                    ErrorContext(tool_id=tool_id, user_ref=user_ref),
                )

        result = self._dispatcher.execute(
            tool_id, coerce_numbers(definition.input_schema, input_data),
        )
        output = normalize(
            definition,
            result,
            ExecutionContext(input_data=dict(input_data), user_ref=user_ref),
            self._share,
        )
        logger.info(
            f"Executed '{tool_id}': value={result.value}",
            extra={"tool_id": tool_id, "user_ref": user_ref},
        )

        if user_ref and self._usage_recorder is not None:
            self._schedule_record(output)
        return output

    def _schedule_record(self, output: ToolExecutionOutput) -> None:
        task = asyncio.create_task(self._record(output))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record(self, output: ToolExecutionOutput) -> None:
        try:
            await self._usage_recorder.record(
                output.user_ref, output.tool_id,
                output.input_data, output.result.to_dict(),
            )
        except Exception as e:
            logger.warning(
                f"Usage recording failed for '{output.tool_id}': {e}",
                extra={"tool_id": output.tool_id, "user_ref": output.user_ref},
                exc_info=True,
            )

    async def drain(self) -> None:
        """Wait for every scheduled usage record to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
