"""Profile submission and moderation service.

``DirectoryService`` owns every read and write against the profiles table:

- ``list_approved`` / ``list_pending`` / ``search_approved`` / ``overview``
- ``submit``: normalize, validate, uniqueness check, external lookup,
  content filter, bio truncation, insert as *pending*
- ``approve``: *pending* -> *approved* with ``approved_at``
- ``reject`` / ``delete``: remove the row (rejection frees the handle)

Store failures surface as ``BackendUnavailable``; nothing is retried.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from app.core.config import settings
from app.core.constants import (
    BIO_MAX_LENGTH,
    DEFAULT_PAGE_SIZE,
    HANDLE_MAX_LENGTH,
    HANDLE_PATTERN,
    INSTAGRAM_BASE_URL,
)
from app.core.errors import (
    BackendUnavailable,
    DuplicateHandle,
    InappropriateContent,
    InvalidHandle,
    NotFound,
)
from app.models.enums import ProfileStatus
from app.models.profile import (
    ModerationOverview,
    Profile,
    ProfileCreate,
    ProfilePage,
)
from app.services.content_filter import contains_blocked_word
from app.services.instagram import ProfileLookup

logger = logging.getLogger(__name__)

_HANDLE_RE = re.compile(HANDLE_PATTERN)

# PostgreSQL unique_violation
_UNIQUE_VIOLATION = "23505"


# ---------------------------------------------------------------------------
# Handle helpers
# ---------------------------------------------------------------------------

def normalize_handle(raw: str) -> str:
    """Trim whitespace and strip one leading ``@``."""
    handle = (raw or "").strip()
    if handle.startswith("@"):
        handle = handle[1:]
    return handle.strip()


def validate_handle(handle: str) -> None:
    """Raise ``InvalidHandle`` unless *handle* is 1-30 allowed characters."""
    if not handle:
        raise InvalidHandle("Instagram handle is required")
    if len(handle) > HANDLE_MAX_LENGTH:
        raise InvalidHandle(
            f"Instagram handle must be at most {HANDLE_MAX_LENGTH} characters"
        )
    if not _HANDLE_RE.fullmatch(handle):
        raise InvalidHandle(
            "Instagram handle may only contain letters, numbers, periods and underscores"
        )


def build_instagram_url(handle: str) -> str:
    return f"{INSTAGRAM_BASE_URL}/{handle}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class DirectoryService:
    """Directory operations over the Supabase profiles table."""

    def __init__(
        self,
        client: Client,
        lookup: ProfileLookup,
        blocked_words: Iterable[str] | None = None,
        table: str | None = None,
    ) -> None:
        self._client = client
        self._lookup = lookup
        self._blocked_words = tuple(blocked_words) if blocked_words is not None else None
        self._table = table or settings.PROFILES_TABLE

    # -- store access -------------------------------------------------------

    def _execute(self, query: Any, action: str) -> list[dict[str, Any]]:
        """Run a PostgREST query, translating transport/API errors."""
        try:
            result = query.execute()
        except PostgrestAPIError as exc:
            if getattr(exc, "code", None) == _UNIQUE_VIOLATION:
                raise DuplicateHandle() from exc
            logger.error(
                "directory_store_failed",
                extra={"action": action, "error_message": str(exc)},
            )
            raise BackendUnavailable(f"Failed to {action}") from exc
        except httpx.HTTPError as exc:
            logger.error(
                "directory_store_unreachable",
                extra={"action": action, "error_message": str(exc)},
            )
            raise BackendUnavailable(f"Failed to {action}") from exc
        return result.data or []

    def _list_by_status(self, status: ProfileStatus, order_by: str) -> list[Profile]:
        query = (
            self._client.table(self._table)
            .select("*")
            .eq("status", status.value)
            .order(order_by, desc=True)
        )
        rows = self._execute(query, f"fetch {status.value} profiles")
        return [Profile(**row) for row in rows]

    def _get(self, profile_id: UUID) -> Profile:
        query = (
            self._client.table(self._table)
            .select("*")
            .eq("id", str(profile_id))
            .limit(1)
        )
        rows = self._execute(query, "fetch profile")
        if not rows:
            raise NotFound()
        return Profile(**rows[0])

    # -- listing ------------------------------------------------------------

    def list_approved(self) -> list[Profile]:
        """Approved profiles, most recently approved first."""
        return self._list_by_status(ProfileStatus.approved, "approved_at")

    def list_pending(self) -> list[Profile]:
        """Pending profiles, most recently submitted first."""
        return self._list_by_status(ProfileStatus.pending, "submitted_at")

    def search_approved(
        self,
        search: str | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> ProfilePage:
        """Return one page of approved profiles matching *search*.

        The term is matched case-insensitively against handle and bio.
        ``total`` counts all matches, not just the returned page.
        """
        profiles = self.list_approved()
        term = (search or "").strip().lower()
        if term:
            profiles = [
                p for p in profiles
                if term in p.handle.lower() or term in (p.bio or "").lower()
            ]
        return ProfilePage(
            profiles=profiles[offset:offset + limit],
            total=len(profiles),
            limit=limit,
            offset=offset,
        )

    def overview(self) -> ModerationOverview:
        """Pending and approved lists with their counts."""
        pending = self.list_pending()
        approved = self.list_approved()
        return ModerationOverview(
            pending=pending,
            approved=approved,
            pending_count=len(pending),
            approved_count=len(approved),
        )

    # -- submission ---------------------------------------------------------

    def submit(self, handle: str, email: str | None = None) -> Profile:
        """Submit *handle* for review and return the stored pending record.

        Steps run in order and stop at the first failure, so nothing is
        inserted unless every check passes.
        """
        handle = normalize_handle(handle)
        validate_handle(handle)

        existing = self._execute(
            self._client.table(self._table)
            .select("id")
            .eq("handle", handle)
            .limit(1),
            "check existing profile",
        )
        if existing:
            logger.info("submit_duplicate_handle", extra={"handle": handle})
            raise DuplicateHandle()

        data = self._lookup.fetch_profile(handle)

        if contains_blocked_word(data.bio, self._blocked_words) or contains_blocked_word(
            handle, self._blocked_words
        ):
            logger.info("submit_inappropriate_content", extra={"handle": handle})
            raise InappropriateContent()

        payload = ProfileCreate(
            handle=handle,
            profile_image=data.profile_image,
            bio=data.bio[:BIO_MAX_LENGTH],
            instagram_url=build_instagram_url(handle),
            email=(email or "").strip() or None,
            status=ProfileStatus.pending,
            submitted_at=_utcnow(),
        )
        rows = self._execute(
            self._client.table(self._table).insert(payload.model_dump(mode="json")),
            "submit profile",
        )
        if not rows:
            raise BackendUnavailable("Failed to submit profile")

        profile = Profile(**rows[0])
        logger.info(
            "profile_submitted",
            extra={"handle": handle, "profile_id": str(profile.id)},
        )
        return profile

    # -- moderation ---------------------------------------------------------

    def approve(self, profile_id: UUID) -> Profile:
        """Mark a profile approved.  Re-approving returns the record unchanged."""
        current = self._get(profile_id)
        if current.status == ProfileStatus.approved:
            return current

        rows = self._execute(
            self._client.table(self._table)
            .update({
                "status": ProfileStatus.approved.value,
                "approved_at": _utcnow().isoformat(),
            })
            .eq("id", str(profile_id)),
            "approve profile",
        )
        # Deleted between the read and the update
        if not rows:
            raise NotFound()

        logger.info("profile_approved", extra={"profile_id": str(profile_id)})
        return Profile(**rows[0])

    def _remove(self, profile_id: UUID, action: str, event: str) -> UUID:
        rows = self._execute(
            self._client.table(self._table).delete().eq("id", str(profile_id)),
            f"{action} profile",
        )
        if not rows:
            raise NotFound()
        logger.info(event, extra={"profile_id": str(profile_id)})
        return profile_id

    def reject(self, profile_id: UUID) -> UUID:
        """Reject a submission by deleting it; the handle may be resubmitted."""
        return self._remove(profile_id, "reject", "profile_rejected")

    def delete(self, profile_id: UUID) -> UUID:
        """Delete a profile regardless of status."""
        return self._remove(profile_id, "delete", "profile_deleted")
