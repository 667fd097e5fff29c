"""Admin identity provider.

Checks a username / password pair against the ``admin_users_ig_directory``
table and opens a session for the matching active admin.

The stored ``password_hash`` column is compared to the supplied password
as-is.  No hashing is applied, so the column effectively holds the
plaintext password; the comparison is constant-time but this remains a
known weakness of the credential table, not something this module fixes.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any

import httpx
from supabase import Client, PostgrestAPIError

from app.core.config import settings
from app.core.errors import BackendUnavailable, InvalidCredentials
from app.models.admin import AdminCredential, AdminIdentity
from app.services.sessions import SessionStore

logger = logging.getLogger(__name__)


class IdentityProvider:
    """Login / logout for directory admins."""

    def __init__(
        self,
        client: Client,
        sessions: SessionStore,
        table: str | None = None,
    ) -> None:
        self._client = client
        self._sessions = sessions
        self._table = table or settings.ADMIN_USERS_TABLE

    def _fetch_active(self, username: str) -> dict[str, Any] | None:
        try:
            result = (
                self._client.table(self._table)
                .select("*")
                .eq("username", username)
                .eq("is_active", True)
                .limit(1)
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            logger.error(
                "admin_lookup_failed",
                extra={"username": username, "error_message": str(exc)},
            )
            raise BackendUnavailable("Failed to verify credentials") from exc
        rows = result.data or []
        return rows[0] if rows else None

    def authenticate(self, username: str, password: str) -> AdminIdentity:
        """Return the identity for valid credentials.

        Unknown users, inactive users and wrong passwords all raise the same
        ``InvalidCredentials`` error.
        """
        row = self._fetch_active(username.strip())
        if row is None:
            logger.info("admin_login_rejected", extra={"username": username})
            raise InvalidCredentials()

        credential = AdminCredential(**row)
        if not secrets.compare_digest(
            password.encode("utf-8"), credential.password_hash.encode("utf-8")
        ):
            logger.info("admin_login_rejected", extra={"username": username})
            raise InvalidCredentials()

        return AdminIdentity(
            id=credential.id,
            username=credential.username,
            email=credential.email,
            role=credential.role,
        )

    def login(self, username: str, password: str) -> tuple[str, AdminIdentity]:
        """Authenticate and open a session; returns ``(token, identity)``."""
        identity = self.authenticate(username, password)
        token = self._sessions.create(identity)
        logger.info(
            "admin_logged_in",
            extra={"username": identity.username, "admin_id": str(identity.id)},
        )
        return token, identity

    def logout(self, token: str) -> None:
        self._sessions.destroy(token)
        logger.info("admin_logged_out")

    def current(self, token: str | None) -> AdminIdentity:
        """Resolve a session token; ``InvalidCredentials`` if missing or expired."""
        identity = self._sessions.resolve(token) if token else None
        if identity is None:
            raise InvalidCredentials("Authentication required")
        return identity
