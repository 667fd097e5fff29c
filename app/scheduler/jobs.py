"""APScheduler job definitions and scheduler management.

Runs a single interval job that evicts expired admin sessions, and provides
start/shutdown/status helpers for the FastAPI lifespan.
"""

from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.core.config import settings
from app.services.sessions import get_session_store

logger = logging.getLogger(__name__)

# Module-level scheduler instance (singleton)
scheduler = BackgroundScheduler()


def _purge_sessions_job() -> None:
    """Wrapper that APScheduler calls on each interval tick."""
    removed = get_session_store().purge_expired()
    if removed:
        logger.info("expired_sessions_purged", extra={"removed": removed})


def start_scheduler() -> None:
    """Add the session purge job and start the background scheduler."""
    scheduler.add_job(
        _purge_sessions_job,
        IntervalTrigger(minutes=settings.SESSION_PURGE_INTERVAL_MINUTES),
        id="purge_sessions",
        replace_existing=True,
    )
    scheduler.start()
    logger.info(
        "scheduler_started",
        extra={
            "interval_minutes": settings.SESSION_PURGE_INTERVAL_MINUTES,
        },
    )


def shutdown_scheduler() -> None:
    """Shutdown the scheduler without waiting for running jobs."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("scheduler_stopped")


def is_scheduler_running() -> bool:
    """Check if the scheduler is currently running."""
    return scheduler.running
