from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from juridico_app.models.user import UserRole
from juridico_app.schemas.base import ApiModel


class LoginRequest(ApiModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserCreate(ApiModel):
    username: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole = UserRole.VIEWER
    permissions: dict[str, Any] | None = None


class UserUpdate(ApiModel):
    username: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole | None = None
    permissions: dict[str, Any] | None = None


class UserOut(ApiModel):
    """User as returned by the API; never includes the password hash."""

    id: UUID
    username: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: str
    permissions: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class CurrentUserOut(UserOut):
    status_permissions: dict[str, bool]
