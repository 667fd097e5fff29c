"""Pydantic models for the ``profiles_ig_directory`` table.

``id`` is assigned by the database.  ``approved_at`` is only populated once
the record has been approved.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import ProfileStatus


class ProfileSubmission(BaseModel):
    """Request body for submitting a handle to the directory."""
    handle: str = Field(..., description="Instagram handle, with or without a leading @")
    email: str | None = None


class ProfileLookupResult(BaseModel):
    """Display data fetched for a handle from the external lookup."""
    profile_image: str
    bio: str = ""


class ProfileCreate(BaseModel):
    """Payload for inserting a new profile (always pending)."""
    handle: str
    profile_image: str
    bio: str
    instagram_url: str
    email: str | None = None
    status: ProfileStatus = ProfileStatus.pending
    submitted_at: datetime


class Profile(BaseModel):
    """Full profile record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    handle: str
    profile_image: str
    bio: str | None = None
    instagram_url: str
    email: str | None = None
    status: ProfileStatus
    submitted_at: datetime
    approved_at: datetime | None = None


class ProfilePage(BaseModel):
    """A page of approved profiles for the public directory."""
    profiles: list[Profile] = []
    total: int = 0
    limit: int
    offset: int = 0


class ModerationOverview(BaseModel):
    """Pending and approved profiles for the admin dashboard."""
    pending: list[Profile] = []
    approved: list[Profile] = []
    pending_count: int = 0
    approved_count: int = 0


class ModerationResult(BaseModel):
    """Confirmation returned after a reject / delete."""
    id: UUID
    deleted: bool = True
