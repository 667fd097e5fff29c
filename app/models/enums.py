"""Enum types mirroring the directory table columns."""

from enum import Enum


class ProfileStatus(str, Enum):
    """Moderation status of a profile record.

    Rejection deletes the row, so there is no ``rejected`` value.
    """
    pending = "pending"
    approved = "approved"


class LookupProvider(str, Enum):
    """Source of external Instagram profile data."""
    mock = "mock"
    apify = "apify"
