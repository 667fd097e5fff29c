"""FastAPI dependencies shared by the routers.

Services are built per request from the process-wide Supabase client,
session store, and configured profile lookup.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.constants import SESSION_COOKIE_NAME
from app.core.errors import InvalidCredentials
from app.db.supabase import get_supabase
from app.models.admin import AdminIdentity
from app.services.auth import IdentityProvider
from app.services.directory import DirectoryService
from app.services.instagram import get_profile_lookup
from app.services.sessions import get_session_store

_bearer = HTTPBearer(auto_error=False)


def get_directory_service() -> DirectoryService:
    return DirectoryService(get_supabase(), get_profile_lookup())


def get_identity_provider() -> IdentityProvider:
    return IdentityProvider(get_supabase(), get_session_store())


async def get_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    """Session token from ``Authorization: Bearer`` or the session cookie."""
    if credentials is not None and credentials.scheme.lower() == "bearer":
        return credentials.credentials
    return request.cookies.get(SESSION_COOKIE_NAME)


async def require_admin(
    token: str | None = Depends(get_session_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> AdminIdentity:
    """Resolve the current admin or fail with 401."""
    try:
        return identity_provider.current(token)
    except InvalidCredentials as exc:
        raise HTTPException(
            status_code=exc.status_code,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
