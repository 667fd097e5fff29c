"""Pydantic models for admin authentication.

``AdminCredential`` mirrors the ``admin_users_ig_directory`` table, which this
service only ever reads.  ``AdminIdentity`` is the password-free subset kept
in a session and returned to clients.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AdminCredential(BaseModel):
    """Admin user row returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str | None = None
    password_hash: str
    is_active: bool = True
    role: str = "admin"


class AdminIdentity(BaseModel):
    """Authenticated admin, as held in a session."""
    id: UUID
    username: str
    email: str | None = None
    role: str = "admin"


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    user: AdminIdentity
