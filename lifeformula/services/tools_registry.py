"""Tools Registry - authoritative in-memory index of active tool definitions.

Invariants:
    - Queries before initialize() (or after shutdown()) raise NotInitializedError
    - The index is immutable; reload() builds a new one and swaps the reference,
      so readers see either the whole old index or the whole new one
    - At most one load runs at a time (asyncio.Lock); a failed reload keeps the old index
    - Duplicate tool ids: last definition wins, a warning is logged
    - Unknown categories return [] rather than raising

Design Decisions:
    - Explicit instance with initialize/reload/shutdown, injected via app.state
      (no module-level singleton)
    - Category view derived from the index on demand, never cached separately
"""

import asyncio
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from lifeformula.core.domain_types import category_display_name
from lifeformula.core.errors import InitializationError, NotInitializedError
from lifeformula.core.repository_protocols import ToolConfigSource
from lifeformula.core.tool_definition import ToolDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryIndex:
    tools: Mapping[str, ToolDefinition]
    categories: Mapping[str, tuple[str, ...]]


def build_index(definitions: Iterable[ToolDefinition]) -> RegistryIndex:
    """Index definitions by id and by category. Inactive ones are skipped."""
    tools: dict[str, ToolDefinition] = {}
    for definition in definitions:
        if not definition.is_active:
            logger.debug(f"Skipping inactive tool '{definition.id}'")
            continue
        if definition.id in tools:
            logger.warning(
                f"Duplicate tool id '{definition.id}': keeping the last definition",
                extra={"tool_id": definition.id},
            )
        tools[definition.id] = definition

    categories: dict[str, list[str]] = {}
    for tool_id, definition in tools.items():
        categories.setdefault(definition.category, []).append(tool_id)

    return RegistryIndex(
        tools=MappingProxyType(tools),
        categories=MappingProxyType(
            {name: tuple(ids) for name, ids in categories.items()},
        ),
    )


class ToolRegistry:
    """Loads tool definitions from a ToolConfigSource and answers lookups."""

    def __init__(self, source: ToolConfigSource):
        self._source = source
        self._index: RegistryIndex | None = None
        self._load_lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._index is not None

    async def initialize(self) -> dict:
        """Load once. A second call without reload() is a no-op."""
        async with self._load_lock:
            if self._index is None:
                self._index = await self._load()
            else:
                logger.info("Tool registry already initialized; use reload() to refresh")
            return self._summary(self._index)

    async def reload(self) -> dict:
        """Rebuild the whole index from the source and swap it in."""
        async with self._load_lock:
            logger.info("Reloading tool registry")
            self._index = await self._load()
            return self._summary(self._index)

    def shutdown(self) -> None:
        self._index = None
        logger.info("Tool registry shut down")

    async def _load(self) -> RegistryIndex:
        try:
            definitions = await self._source.get_all_active_tool_definitions()
        except Exception as e:
            logger.error(f"Tool registry load failed: {e}", exc_info=True)
            raise InitializationError(str(e)) from e
        index = build_index(definitions)
        logger.info(
            f"Tool registry loaded {len(index.tools)} tools "
            f"in {len(index.categories)} categories",
            extra={"tool_count": len(index.tools)},
        )
        return index

    @staticmethod
    def _summary(index: RegistryIndex) -> dict:
        return {
            "tool_count": len(index.tools),
            "categories": list(index.categories),
        }

    def _require_index(self) -> RegistryIndex:
        index = self._index
        if index is None:
            raise NotInitializedError()
        return index

    # --- queries ------------------------------------------------------------

    def get_tool(self, tool_id: str) -> ToolDefinition | None:
        return self._require_index().tools.get(tool_id)

    def get_all_tools(self, public_only: bool = True) -> list:
        tools = list(self._require_index().tools.values())
        if public_only:
            return [tool.to_public() for tool in tools]
        return tools

    def get_tools_by_category(self, category: str, public_only: bool = True) -> list:
        index = self._require_index()
        tools = [index.tools[tool_id] for tool_id in index.categories.get(category, ())]
        if public_only:
            return [tool.to_public() for tool in tools]
        return tools

    def list_categories(self) -> list[dict]:
        index = self._require_index()
        return [
            {
                "name": name,
                "display_name": category_display_name(name),
                "tool_count": len(tool_ids),
                "tool_ids": list(tool_ids),
            }
            for name, tool_ids in index.categories.items()
        ]

    def get_stats(self) -> dict:
        """Counts over the current index.

        active_tools always equals total_tools: build_index() drops inactive
        definitions, the key stays for clients that read it.
        """
        index = self._require_index()
        return {
            "total_tools": len(index.tools),
            "active_tools": len(index.tools),
            "categories": len(index.categories),
            "tools_by_category": {
                name: len(tool_ids) for name, tool_ids in index.categories.items()
            },
        }
