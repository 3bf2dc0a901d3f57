"""Life Formula API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LifeFormulaError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Registry, dispatcher and executor built in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DATABASE_URL unset: built-in catalog, no usage gate, no recording.
      DATABASE_URL set: tables created if missing, catalog seeded, SQL collaborators wired
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lifeformula.api.error_handlers import register_error_handlers
from lifeformula.api.routes import health, tools
from lifeformula.config import Settings, get_settings
from lifeformula.core.normalize_result import ShareSettings
from lifeformula.infrastructure.database import close_db, init_db
from lifeformula.infrastructure.observability import setup_logging
from lifeformula.infrastructure.repositories import (
    SqlToolConfigSource,
    SqlUsageGate,
    SqlUsageRecorder,
    StaticToolConfigSource,
    seed_tool_configs,
)
from lifeformula.services.tool_dispatch import CalculationDispatcher
from lifeformula.services.tool_executor import ToolExecutor
from lifeformula.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)


async def build_engine(settings: Settings) -> tuple[ToolRegistry, ToolExecutor]:
    """Wire registry, dispatcher and executor for the configured backend."""
    share = ShareSettings(base_url=settings.share_base_url, hashtag=settings.share_hashtag)

    if settings.database_url:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await manager.create_all()
        async with manager.session() as db:
            await seed_tool_configs(db)
        registry = ToolRegistry(SqlToolConfigSource(manager))
        gate = SqlUsageGate(manager, settings.daily_free_limit)
        recorder = SqlUsageRecorder(manager, settings.daily_free_limit)
    else:
        logger.info("DATABASE_URL not set, serving the built-in tool catalog")
        registry = ToolRegistry(StaticToolConfigSource())
        gate = recorder = None

    await registry.initialize()
    executor = ToolExecutor(
        registry,
        CalculationDispatcher(registry),
        usage_gate=gate,
        usage_recorder=recorder,
        share=share,
    )
    return registry, executor


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.registry, app.state.executor = await build_engine(settings)
    logger.info("Life Formula API started")
    yield
    logger.info("Life Formula API shutting down")
    await app.state.executor.drain()
    app.state.registry.shutdown()
    await close_db()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Life Formula API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(tools.router)
    register_error_handlers(app)
    return app


app = create_app()
