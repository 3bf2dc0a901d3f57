"""Root conftest - shared fixtures for the tool engine."""

import os

import pytest

# Tests never talk to a real database unless a fixture wires one explicitly
os.environ.pop("DATABASE_URL", None)

from lifeformula.core.reference_tables import DEFAULT_TABLES  # noqa: E402
from lifeformula.infrastructure.repositories import StaticToolConfigSource  # noqa: E402
from lifeformula.services.tool_dispatch import CalculationDispatcher  # noqa: E402
from lifeformula.services.tools_registry import ToolRegistry  # noqa: E402


@pytest.fixture
def tables():
    return DEFAULT_TABLES


@pytest.fixture
async def registry():
    registry = ToolRegistry(StaticToolConfigSource())
    await registry.initialize()
    yield registry
    registry.shutdown()


@pytest.fixture
def dispatcher(registry):
    return CalculationDispatcher(registry)
