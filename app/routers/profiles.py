"""Public directory endpoints.

GET  /api/v1/profiles -- approved profiles (search + pagination).
POST /api/v1/profiles -- submit a handle for review.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.core.errors import DirectoryError
from app.models.profile import Profile, ProfilePage, ProfileSubmission
from app.routers.deps import get_directory_service
from app.services.directory import DirectoryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ProfilePage)
def list_profiles(
    search: str | None = Query(
        default=None,
        description="Case-insensitive match against handle or bio",
    ),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
    service: DirectoryService = Depends(get_directory_service),
) -> ProfilePage:
    """Return approved profiles, most recently approved first."""
    try:
        return service.search_approved(search=search, limit=limit, offset=offset)
    except DirectoryError as exc:
        logger.error(
            "list_profiles_failed",
            extra={"search": search, "error_message": exc.message},
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


@router.post("", response_model=Profile, status_code=201)
def submit_profile(
    body: ProfileSubmission,
    service: DirectoryService = Depends(get_directory_service),
) -> Profile:
    """Submit an Instagram handle.  The profile stays pending until approved."""
    try:
        return service.submit(body.handle, body.email)
    except DirectoryError as exc:
        logger.warning(
            "submit_profile_failed",
            extra={
                "handle": body.handle,
                "error": type(exc).__name__,
                "error_message": exc.message,
            },
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
