"""Tools Routes - list, describe, execute and reload calculator tools.

Invariants:
    - Routes hold no business logic: registry and executor come from app.state
    - Engine errors propagate to the global handlers (api/error_handlers.py)
    - /tools/categories is declared before /tools/{tool_id} so it is not shadowed

Design Decisions:
    - User reference travels in the X-User-Ref header; absent means anonymous
      (no usage gate, nothing recorded)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Header, Query, Request

from lifeformula.core.errors import ToolNotFoundError
from lifeformula.schemas.tools import (
    CategoryListResponse,
    ExecutionResponse,
    ReloadResponse,
    ToolListResponse,
    ToolResponse,
)
from lifeformula.services.tool_executor import ToolExecutor
from lifeformula.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


def _registry(request: Request) -> ToolRegistry:
    return request.app.state.registry


def _executor(request: Request) -> ToolExecutor:
    return request.app.state.executor


@router.get("", response_model=ToolListResponse)
async def list_tools(request: Request, category: str | None = Query(default=None)):
    registry = _registry(request)
    if category:
        tools = registry.get_tools_by_category(category)
    else:
        tools = registry.get_all_tools()
    return ToolListResponse(data=tools, count=len(tools))


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(request: Request):
    return CategoryListResponse(data=_registry(request).list_categories())


@router.get("/{tool_id}", response_model=ToolResponse)
async def get_tool(tool_id: str, request: Request):
    definition = _registry(request).get_tool(tool_id)
    if definition is None:
        raise ToolNotFoundError(tool_id)
    return ToolResponse(data=definition.to_public())


@router.post("/{tool_id}/execute", response_model=ExecutionResponse)
async def execute_tool(
    tool_id: str,
    request: Request,
    input_data: dict[str, Any] = Body(...),
    x_user_ref: str | None = Header(default=None),
):
    """Run one tool on the posted input mapping."""
    output = await _executor(request).execute(tool_id, input_data, x_user_ref)
    return ExecutionResponse(data=output.to_dict())


@router.post("/reload", response_model=ReloadResponse)
async def reload_tools(request: Request):
    """Rebuild the registry from its configuration source."""
    summary = await _registry(request).reload()
    logger.info("Tool registry reloaded via API", extra={"tool_count": summary["tool_count"]})
    return ReloadResponse(data=summary)
