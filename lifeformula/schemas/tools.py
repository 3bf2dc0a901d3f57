"""Tool Schemas - response envelopes for the tools routes.

Invariants:
    - Every success response carries success=True and a data payload
    - Field specs are passed through as produced by FieldSpec.to_public()
"""

from typing import Any

from pydantic import BaseModel, Field


class ToolSummary(BaseModel):
    id: str
    name: str
    description: str
    category: str
    icon: str
    input_schema: dict[str, dict[str, Any]]


class CategoryInfo(BaseModel):
    name: str
    display_name: str
    tool_count: int
    tool_ids: list[str]


class ToolListResponse(BaseModel):
    success: bool = True
    data: list[ToolSummary]
    count: int


class ToolResponse(BaseModel):
    success: bool = True
    data: ToolSummary


class CategoryListResponse(BaseModel):
    success: bool = True
    data: list[CategoryInfo]


class ExecutionData(BaseModel):
    tool_id: str
    tool_name: str
    input_data: dict[str, Any]
    result: dict[str, Any]
    timestamp: str
    share_config: dict[str, Any]


class ExecutionResponse(BaseModel):
    success: bool = True
    data: ExecutionData


class ReloadResponse(BaseModel):
    success: bool = True
    data: dict[str, Any] = Field(default_factory=dict)
