"""External Instagram profile lookup.

Given a normalized handle, returns the profile picture URL and biography
shown on the directory card.  Two implementations share the
``ProfileLookup`` interface:

- ``MockProfileLookup``: a canned table for a few demo handles and a
  pseudo-random pick from fallback images / bios for everything else.
- ``ApifyProfileLookup``: runs the Apify Instagram profile scraper actor.

``get_profile_lookup()`` returns the one selected by
``settings.PROFILE_LOOKUP_PROVIDER``.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Any

from apify_client import ApifyClient

from app.core.config import settings
from app.core.constants import (
    FALLBACK_BIOS,
    FALLBACK_PROFILE_IMAGES,
    MOCK_PROFILES,
)
from app.core.errors import LookupFailed, NotFoundRemotely, RateLimited
from app.models.enums import LookupProvider
from app.models.profile import ProfileLookupResult

logger = logging.getLogger(__name__)


class ProfileLookup(ABC):
    """Fetches display data for an Instagram handle."""

    @abstractmethod
    def fetch_profile(self, handle: str) -> ProfileLookupResult:
        """Return image URL and bio for *handle*.

        Raises ``LookupFailed`` (or one of ``RateLimited`` /
        ``NotFoundRemotely``) when the data cannot be fetched.
        """


# ---------------------------------------------------------------------------
# Mock lookup
# ---------------------------------------------------------------------------

class MockProfileLookup(ProfileLookup):
    """Deterministic table with a randomized fallback.

    Pass a seeded ``random.Random`` to make the fallback reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def fetch_profile(self, handle: str) -> ProfileLookupResult:
        canned = MOCK_PROFILES.get(handle)
        if canned is not None:
            return ProfileLookupResult(**canned)

        return ProfileLookupResult(
            profile_image=self._rng.choice(FALLBACK_PROFILE_IMAGES),
            bio=self._rng.choice(FALLBACK_BIOS),
        )


# ---------------------------------------------------------------------------
# Apify lookup
# ---------------------------------------------------------------------------

def _get_apify_client() -> ApifyClient:
    """Return a configured Apify client."""
    return ApifyClient(settings.APIFY_TOKEN)


def _map_apify_profile(item: dict[str, Any]) -> ProfileLookupResult:
    """Map a single Apify profile-scraper result to a ``ProfileLookupResult``."""
    image = item.get("profilePicUrlHD") or item.get("profilePicUrl") or ""
    return ProfileLookupResult(
        profile_image=str(image),
        bio=str(item.get("biography") or ""),
    )


class ApifyProfileLookup(ProfileLookup):
    """Live lookup through the Apify Instagram profile scraper actor."""

    def __init__(
        self,
        client: ApifyClient | None = None,
        actor_id: str | None = None,
    ) -> None:
        self._client = client
        self._actor_id = actor_id or settings.APIFY_PROFILE_ACTOR_ID

    def fetch_profile(self, handle: str) -> ProfileLookupResult:
        logger.info(
            "fetch_profile_started",
            extra={"handle": handle, "actor_id": self._actor_id},
        )

        try:
            apify = self._client or _get_apify_client()
            run_result = apify.actor(self._actor_id).call(
                run_input={"usernames": [handle]}
            )
            if not run_result:
                raise RuntimeError("actor run returned no result")
            items: list[dict[str, Any]] = list(
                apify.dataset(run_result["defaultDatasetId"]).iterate_items()
            )
        except Exception as exc:
            logger.error(
                "fetch_profile_apify_failed",
                extra={
                    "handle": handle,
                    "actor_id": self._actor_id,
                    "error_message": str(exc),
                },
            )
            if getattr(exc, "status_code", None) == 429:
                raise RateLimited() from exc
            raise LookupFailed(f"Failed to fetch Instagram data: {exc}") from exc

        # The scraper reports missing accounts as an item with an ``error`` key
        profiles = [item for item in items if not item.get("error")]
        if not profiles:
            raise NotFoundRemotely(f"Instagram profile @{handle} does not exist")

        return _map_apify_profile(profiles[0])


def get_profile_lookup() -> ProfileLookup:
    """Return the lookup implementation selected in settings."""
    provider = settings.PROFILE_LOOKUP_PROVIDER.strip().lower()
    if provider == LookupProvider.apify.value:
        return ApifyProfileLookup()
    if provider != LookupProvider.mock.value:
        logger.warning(
            "unknown_lookup_provider",
            extra={"provider": provider, "fallback": LookupProvider.mock.value},
        )
    return MockProfileLookup()
