"""Health Probes: liveness and readiness endpoints.

Invariants:
    - GET /health always returns "ok" if the process is up (no core, no database)
    - GET /health/ready returns 503 only when history is enabled and its database
      is unreachable
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from linkhop.config import Settings, get_settings
from linkhop.infrastructure import database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_class=PlainTextResponse)
async def health_check():
    """Liveness probe."""
    return "ok"


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe, includes history database connectivity when enabled."""
    if not settings.history.enabled:
        return {"status": "ready", "checks": {"history": "disabled"}}
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "history_database_unavailable"},
        )
    return {"status": "ready", "checks": {"history": "healthy"}}
