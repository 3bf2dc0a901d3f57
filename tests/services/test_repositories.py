"""SQL Collaborators - tests for the tool config source, seeding and usage tracking.

Tests cover:
    - Seeding writes the built-in catalog once (idempotent upsert)
    - Active rows load ordered by category then name; inactive rows skipped
    - JSON text columns decode; malformed rows are skipped, not fatal
    - Usage gate: free quota, remaining never negative, premium unlimited
    - Recorder writes usage rows and bumps the daily counter
"""

import datetime

from sqlalchemy import func, select

from lifeformula.core.tool_catalog import BUILTIN_TOOL_ROWS
from lifeformula.infrastructure.repositories import (
    SqlToolConfigSource,
    SqlUsageGate,
    SqlUsageRecorder,
    get_or_create_user,
    seed_tool_configs,
)
from lifeformula.models.tool_config import ToolConfig
from lifeformula.models.tool_usage import ToolUsage
from lifeformula.models.usage_limit import UsageLimit
from lifeformula.models.user_subscription import UserSubscription
from lifeformula.services.tools_registry import ToolRegistry

TODAY = datetime.date(2026, 3, 1)


def _today() -> datetime.date:
    return TODAY


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


async def test_seed_is_idempotent(test_db):
    assert await seed_tool_configs(test_db) == 12
    await seed_tool_configs(test_db)
    assert await _count(test_db, ToolConfig) == 12


async def test_source_loads_seeded_catalog_in_order(test_db, db_manager):
    await seed_tool_configs(test_db)
    definitions = await SqlToolConfigSource(db_manager).get_all_active_tool_definitions()

    assert len(definitions) == len(BUILTIN_TOOL_ROWS)
    keys = [(d.category, d.display_name) for d in definitions]
    assert keys == sorted(keys)
    moonlight = next(d for d in definitions if d.id == "moonlight-calculator")
    assert moonlight.input_schema["salary"].required is True
    assert moonlight.icon == "💸"


async def test_source_skips_inactive_and_malformed_rows(test_db, db_manager):
    test_db.add_all([
        ToolConfig(
            tool_type="good", display_name="Good", category="fun",
            input_schema={"x": {"type": "number"}},
        ),
        ToolConfig(
            tool_type="retired", display_name="Retired", category="fun",
            is_active=False,
        ),
        ToolConfig(
            tool_type="broken", display_name="Broken", category="fun",
            input_schema={"x": {"type": "colour"}},
        ),
    ])
    await test_db.commit()

    definitions = await SqlToolConfigSource(db_manager).get_all_active_tool_definitions()
    assert [d.id for d in definitions] == ["good"]


async def test_source_decodes_json_text_columns(test_db, db_manager):
    test_db.add(ToolConfig(
        tool_type="legacy", display_name="Legacy", category="calculator",
        input_schema='{"amount": {"type": "number", "required": true}}',
    ))
    await test_db.commit()

    [definition] = await SqlToolConfigSource(db_manager).get_all_active_tool_definitions()
    assert definition.input_schema["amount"].required is True
    assert definition.icon == "🧮"


async def test_registry_over_sql_source(test_db, db_manager):
    await seed_tool_configs(test_db)
    registry = ToolRegistry(SqlToolConfigSource(db_manager))
    summary = await registry.initialize()
    assert summary["tool_count"] == 12


async def test_new_user_gets_full_quota(db_manager):
    gate = SqlUsageGate(db_manager, daily_limit=10, today=_today)
    decision = await gate.can_execute("visitor-1")
    assert decision.allowed is True
    assert decision.remaining == 10
    assert decision.limit == 10


async def test_recorder_writes_usage_and_counts(db_manager, test_db):
    recorder = SqlUsageRecorder(db_manager, daily_limit=10, today=_today)
    await recorder.record("visitor-1", "noodle-survival", {"budget": 1000}, {"value": 13})
    await recorder.record("visitor-1", "noodle-survival", {"budget": 500}, {"value": 6})

    assert await _count(test_db, ToolUsage) == 2
    usage = (await test_db.execute(select(UsageLimit))).scalar_one()
    assert usage.date == TODAY
    assert usage.tool_usage_count == 2

    gate = SqlUsageGate(db_manager, daily_limit=10, today=_today)
    assert (await gate.can_execute("visitor-1")).remaining == 8


async def test_gate_refuses_when_quota_used(db_manager):
    recorder = SqlUsageRecorder(db_manager, daily_limit=2, today=_today)
    for _ in range(3):
        await recorder.record("visitor-1", "birthday-collision", {}, {})

    decision = await SqlUsageGate(db_manager, daily_limit=2, today=_today).can_execute(
        "visitor-1",
    )
    assert decision.allowed is False
    assert decision.remaining == 0


async def test_quota_resets_next_day(db_manager):
    recorder = SqlUsageRecorder(db_manager, daily_limit=1, today=_today)
    await recorder.record("visitor-1", "birthday-collision", {}, {})

    tomorrow = SqlUsageGate(
        db_manager, daily_limit=1, today=lambda: TODAY + datetime.timedelta(days=1),
    )
    assert (await tomorrow.can_execute("visitor-1")).allowed is True


async def test_premium_user_is_unlimited(db_manager, test_db):
    user = await get_or_create_user(test_db, "vip")
    test_db.add(UserSubscription(user_id=user.id, tier="premium", status="active"))
    await test_db.commit()

    recorder = SqlUsageRecorder(db_manager, daily_limit=1, today=_today)
    await recorder.record("vip", "birthday-collision", {}, {})
    await recorder.record("vip", "birthday-collision", {}, {})

    decision = await SqlUsageGate(db_manager, daily_limit=1, today=_today).can_execute("vip")
    assert decision.allowed is True
    assert decision.remaining is None
    assert decision.limit is None
