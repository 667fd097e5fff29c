"""Domain error hierarchy.

Every failure raised by the directory, lookup, and identity services derives
from ``DirectoryError`` and carries the HTTP status the routers translate it
into.  Messages are human-readable and safe to show to end users.
"""

from __future__ import annotations


class DirectoryError(Exception):
    """Base class for all directory service failures."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidHandle(DirectoryError):
    status_code = 422
    default_message = "Invalid Instagram handle"


class DuplicateHandle(DirectoryError):
    status_code = 409
    default_message = "This Instagram handle has already been submitted"


class LookupFailed(DirectoryError):
    status_code = 502
    default_message = "Failed to fetch Instagram data"


class RateLimited(LookupFailed):
    status_code = 429
    default_message = "Instagram lookup is rate limited, try again later"


class NotFoundRemotely(LookupFailed):
    status_code = 422
    default_message = "Instagram profile does not exist"


class InappropriateContent(DirectoryError):
    status_code = 422
    default_message = "Profile contains inappropriate content"


class NotFound(DirectoryError):
    status_code = 404
    default_message = "Profile not found"


class InvalidCredentials(DirectoryError):
    status_code = 401
    default_message = "Invalid username or password"


class BackendUnavailable(DirectoryError):
    status_code = 503
    default_message = "Directory backend is unavailable"
