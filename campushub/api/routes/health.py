"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 until the session restore has finished,
      or when the database is unreachable (memory backend skips the DB check)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import campushub.infrastructure.database as db_module
from campushub.api.dependencies import get_session_store
from campushub.config import get_settings
from campushub.services.session_store import SessionStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "campushub-session",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: SessionStore = Depends(get_session_store)):
    """Readiness probe: session restored and storage reachable."""
    if store.loading:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "session_loading"},
        )
    if get_settings().session_backend == "memory":
        return {"status": "ready", "checks": {"storage": "memory"}}
    manager = db_module.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
