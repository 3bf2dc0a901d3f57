"""SQL Collaborators - configuration source, usage gate and usage recorder over SQLAlchemy.

Invariants:
    - Rows are converted to ToolDefinition at this boundary; a malformed row is
      logged and skipped, the rest of the catalog still loads
    - Active tools are returned ordered by category, then display name
    - Premium users with an active subscription are never limited
    - Free users: allowed while today's count < daily_limit; remaining never negative
    - Unknown user references are created on first use

Design Decisions:
    - Each call opens its own session through DatabaseSessionManager: the recorder
      runs after the request finished, so it cannot borrow the request's session
    - StaticToolConfigSource lives beside the SQL source: both satisfy the same
      ToolConfigSource protocol and main.py picks one
"""

import datetime
import logging
from typing import Any, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifeformula.core.repository_protocols import UsageDecision
from lifeformula.core.tool_catalog import BUILTIN_TOOL_ROWS, builtin_definitions
from lifeformula.core.tool_definition import ToolDefinition, parse_tool_row
from lifeformula.infrastructure.database import DatabaseSessionManager
from lifeformula.models.tool_config import ToolConfig
from lifeformula.models.tool_usage import ToolUsage
from lifeformula.models.usage_limit import UsageLimit
from lifeformula.models.user import User
from lifeformula.models.user_subscription import UserSubscription

logger = logging.getLogger(__name__)


def _utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


# --- tool configuration -----------------------------------------------------

class StaticToolConfigSource:
    """Serves a fixed list of definitions (built-in catalog by default)."""

    def __init__(self, definitions: list[ToolDefinition] | None = None):
        self._definitions = (
            builtin_definitions() if definitions is None else list(definitions)
        )

    async def get_all_active_tool_definitions(self) -> list[ToolDefinition]:
        return [d for d in self._definitions if d.is_active]


class SqlToolConfigSource:
    """Reads active rows of tool_configs."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get_all_active_tool_definitions(self) -> list[ToolDefinition]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(ToolConfig)
                .where(ToolConfig.is_active.is_(True))
                .order_by(ToolConfig.category, ToolConfig.display_name)
            )
            rows = result.scalars().all()

        definitions = []
        for row in rows:
            try:
                definitions.append(parse_tool_row(row.to_row()))
            except (KeyError, ValueError) as e:
                logger.warning(
                    f"Skipping malformed tool config row '{row.tool_type}': {e}",
                    extra={"tool_id": row.tool_type},
                )
        return definitions


async def seed_tool_configs(
    db: AsyncSession, rows: list[dict[str, Any]] | None = None,
) -> int:
    """Insert or update the built-in catalog rows. Returns the number of rows written."""
    rows = BUILTIN_TOOL_ROWS if rows is None else rows
    existing = {
        config.tool_type: config
        for config in (await db.execute(select(ToolConfig))).scalars().all()
    }
    for row in rows:
        config = existing.get(row["tool_type"])
        if config is None:
            config = ToolConfig(tool_type=row["tool_type"])
            db.add(config)
        config.display_name = row["display_name"]
        config.description = row.get("description")
        config.category = row["category"]
        config.icon = row.get("icon")
        config.input_schema = row.get("input_schema", {})
        config.calculation_logic = row.get("calculation_logic", {})
        config.monetization_config = row.get("monetization_config", {})
        config.is_active = row.get("is_active", True)
    await db.commit()
    logger.info(f"Seeded {len(rows)} tool configs", extra={"tool_count": len(rows)})
    return len(rows)


# --- usage ------------------------------------------------------------------

async def get_or_create_user(db: AsyncSession, user_ref: str) -> User:
    user = (
        await db.execute(select(User).where(User.session_id == user_ref))
    ).scalar_one_or_none()
    if user is None:
        user = User(session_id=user_ref)
        db.add(user)
        await db.flush()
        logger.info("Created user for new reference", extra={"user_ref": user_ref})
    return user


async def _today_usage(db: AsyncSession, user_id: int, today: datetime.date) -> UsageLimit | None:
    return (
        await db.execute(
            select(UsageLimit).where(
                UsageLimit.user_id == user_id, UsageLimit.date == today,
            )
        )
    ).scalar_one_or_none()


class SqlUsageGate:
    """Daily free quota, unlimited for active premium subscriptions."""

    def __init__(
        self,
        manager: DatabaseSessionManager,
        daily_limit: int = 10,
        today: Callable[[], datetime.date] = _utc_today,
    ):
        self._manager = manager
        self._daily_limit = daily_limit
        self._today = today

    async def can_execute(self, user_ref: str) -> UsageDecision:
        async with self._manager.session() as db:
            user = await get_or_create_user(db, user_ref)
            subscription = (
                await db.execute(
                    select(UserSubscription).where(UserSubscription.user_id == user.id)
                )
            ).scalar_one_or_none()
            if subscription is not None and subscription.is_premium:
                await db.commit()
                return UsageDecision(allowed=True)

            usage = await _today_usage(db, user.id, self._today())
            await db.commit()

        used = usage.tool_usage_count if usage is not None else 0
        limit = self._daily_limit
        return UsageDecision(
            allowed=used < limit, remaining=max(0, limit - used), limit=limit,
        )


class SqlUsageRecorder:
    """Writes one tool_usage row and bumps today's counter."""

    def __init__(
        self,
        manager: DatabaseSessionManager,
        daily_limit: int = 10,
        today: Callable[[], datetime.date] = _utc_today,
    ):
        self._manager = manager
        self._daily_limit = daily_limit
        self._today = today

    async def record(
        self, user_ref: str, tool_id: str,
        input_data: dict[str, Any], result: dict[str, Any],
    ) -> None:
        async with self._manager.session() as db:
            user = await get_or_create_user(db, user_ref)
            db.add(ToolUsage(
                user_id=user.id, tool_type=tool_id,
                input_data=input_data, result_data=result,
            ))

            today = self._today()
            usage = await _today_usage(db, user.id, today)
            if usage is None:
                db.add(UsageLimit(
                    user_id=user.id, date=today,
                    tool_usage_count=1, daily_limit=self._daily_limit,
                ))
            else:
                usage.tool_usage_count += 1
            await db.commit()

        logger.info(
            f"Recorded usage of '{tool_id}'",
            extra={"tool_id": tool_id, "user_ref": user_ref},
        )
