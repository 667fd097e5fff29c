"""Moderation endpoints (admin session required).

GET    /api/v1/admin/profiles               -- pending + approved overview
GET    /api/v1/admin/profiles/pending       -- pending queue
POST   /api/v1/admin/profiles/{id}/approve  -- approve a submission
POST   /api/v1/admin/profiles/{id}/reject   -- reject (delete) a submission
DELETE /api/v1/admin/profiles/{id}          -- delete any profile
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from app.core.errors import DirectoryError
from app.models.admin import AdminIdentity
from app.models.profile import ModerationOverview, ModerationResult, Profile
from app.routers.deps import get_directory_service, require_admin
from app.services.directory import DirectoryService

logger = logging.getLogger(__name__)

router = APIRouter()


def _http_error(action: str, exc: DirectoryError, **extra: str) -> HTTPException:
    logger.error(
        f"{action}_failed",
        extra={**extra, "error": type(exc).__name__, "error_message": exc.message},
    )
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get("", response_model=ModerationOverview)
def moderation_overview(
    admin: AdminIdentity = Depends(require_admin),
    service: DirectoryService = Depends(get_directory_service),
) -> ModerationOverview:
    try:
        return service.overview()
    except DirectoryError as exc:
        raise _http_error("moderation_overview", exc) from exc


@router.get("/pending", response_model=list[Profile])
def list_pending(
    admin: AdminIdentity = Depends(require_admin),
    service: DirectoryService = Depends(get_directory_service),
) -> list[Profile]:
    """Return pending submissions, newest first."""
    try:
        return service.list_pending()
    except DirectoryError as exc:
        raise _http_error("list_pending", exc) from exc


@router.post("/{profile_id}/approve", response_model=Profile)
def approve_profile(
    profile_id: UUID,
    admin: AdminIdentity = Depends(require_admin),
    service: DirectoryService = Depends(get_directory_service),
) -> Profile:
    try:
        profile = service.approve(profile_id)
    except DirectoryError as exc:
        raise _http_error("approve_profile", exc, profile_id=str(profile_id)) from exc
    logger.info(
        "approve_profile_by_admin",
        extra={"profile_id": str(profile_id), "admin": admin.username},
    )
    return profile


@router.post("/{profile_id}/reject", response_model=ModerationResult)
def reject_profile(
    profile_id: UUID,
    admin: AdminIdentity = Depends(require_admin),
    service: DirectoryService = Depends(get_directory_service),
) -> ModerationResult:
    """Reject a submission.  The row is deleted so the handle can be resubmitted."""
    try:
        service.reject(profile_id)
    except DirectoryError as exc:
        raise _http_error("reject_profile", exc, profile_id=str(profile_id)) from exc
    logger.info(
        "reject_profile_by_admin",
        extra={"profile_id": str(profile_id), "admin": admin.username},
    )
    return ModerationResult(id=profile_id)


@router.delete("/{profile_id}", response_model=ModerationResult)
def delete_profile(
    profile_id: UUID,
    admin: AdminIdentity = Depends(require_admin),
    service: DirectoryService = Depends(get_directory_service),
) -> ModerationResult:
    try:
        service.delete(profile_id)
    except DirectoryError as exc:
        raise _http_error("delete_profile", exc, profile_id=str(profile_id)) from exc
    logger.info(
        "delete_profile_by_admin",
        extra={"profile_id": str(profile_id), "admin": admin.username},
    )
    return ModerationResult(id=profile_id)
