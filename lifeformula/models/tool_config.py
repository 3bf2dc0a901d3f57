"""ToolConfig ORM - the configuration store row for one tool definition.

Invariants:
    - tool_type is the unique public tool id
    - input_schema/calculation_logic/monetization_config are JSON columns;
      parse_tool_row() accepts them decoded or as JSON text
    - Only is_active rows are served to the registry
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifeformula.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ToolConfig(Base):
    __tablename__ = "tool_configs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tool_type: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True,
    )
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    icon: Mapped[str | None] = mapped_column(String(16), nullable=True)
    input_schema: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    calculation_logic: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    monetization_config: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    def to_row(self) -> dict:
        """Column mapping in the shape parse_tool_row() reads."""
        return {
            "tool_type": self.tool_type,
            "display_name": self.display_name,
            "description": self.description,
            "category": self.category,
            "icon": self.icon,
            "input_schema": self.input_schema,
            "calculation_logic": self.calculation_logic,
            "monetization_config": self.monetization_config,
            "is_active": self.is_active,
        }
