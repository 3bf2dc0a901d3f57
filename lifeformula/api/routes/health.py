"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the registry is not loaded or a configured
      database is unreachable
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from lifeformula.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": "lifeformula-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: registry loaded and database (if any) reachable."""
    registry = getattr(request.app.state, "registry", None)
    registry_ok = registry is not None and registry.is_initialized

    manager = database.db_manager
    if manager is None:
        db_status = "not_configured"
    else:
        db_status = "healthy" if await manager.health_check() else "unavailable"

    if not registry_ok or db_status == "unavailable":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "checks": {
                    "registry": "loaded" if registry_ok else "not_loaded",
                    "database": db_status,
                },
            },
        )
    return {
        "status": "ready",
        "checks": {"registry": "loaded", "database": db_status},
    }
