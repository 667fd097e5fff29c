"""Health check endpoint.

Returns service status including database connectivity, scheduler state,
and the number of profiles waiting for review.
"""

import logging
from typing import Any

from fastapi import APIRouter
from starlette.responses import JSONResponse

from app.core.config import settings
from app.db.supabase import get_supabase
from app.scheduler.jobs import is_scheduler_running

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check() -> Any:
    """Return health status with a real Supabase connectivity test.

    Returns 200 OK when healthy, 503 when the database is down.
    """
    db_status = "disconnected"
    pending: int | None = None

    try:
        client = get_supabase()
        result = (
            client.table(settings.PROFILES_TABLE)
            .select("id", count="exact")
            .eq("status", "pending")
            .limit(1)
            .execute()
        )
        if result is not None:
            db_status = "connected"
            if isinstance(result.count, int):
                pending = result.count
    except Exception:
        logger.warning("Health check: Supabase connection failed", exc_info=True)

    scheduler_status = "running" if is_scheduler_running() else "stopped"

    payload: dict[str, Any] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "scheduler": scheduler_status,
        "pending_profiles": pending,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
