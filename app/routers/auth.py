"""Admin session endpoints.

POST /api/v1/auth/login  -- check credentials, open a session.
POST /api/v1/auth/logout -- close the current session.
GET  /api/v1/auth/me     -- identity behind the current session.

The token is returned in the body and also set as the ``adminUser`` cookie;
either form is accepted on later requests.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response

from app.core.config import settings
from app.core.constants import SESSION_COOKIE_NAME
from app.core.errors import DirectoryError
from app.models.admin import AdminIdentity, LoginRequest, LoginResponse
from app.routers.deps import get_identity_provider, get_session_token, require_admin
from app.services.auth import IdentityProvider
from app.services.sessions import get_session_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    response: Response,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> LoginResponse:
    try:
        token, identity = identity_provider.login(body.username, body.password)
    except DirectoryError as exc:
        logger.warning(
            "login_failed",
            extra={"username": body.username, "error_message": exc.message},
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=get_session_store().cookie_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return LoginResponse(token=token, user=identity)


@router.post("/logout")
def logout(
    response: Response,
    admin: AdminIdentity = Depends(require_admin),
    token: str | None = Depends(get_session_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> dict[str, Any]:
    if token:
        identity_provider.logout(token)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"status": "logged_out", "username": admin.username}


@router.get("/me", response_model=AdminIdentity)
def me(admin: AdminIdentity = Depends(require_admin)) -> AdminIdentity:
    return admin
