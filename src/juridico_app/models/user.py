"""User model - application accounts with role and permission map."""

import copy
from enum import Enum

from sqlalchemy import JSON, Column, String

from juridico_app.core.database import Base
from juridico_app.models.base import BaseModelMixin


class UserRole(str, Enum):
    """Roles an account can hold."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


DEFAULT_PERMISSIONS = {
    "matricula": {"view": True, "edit": False},
    "nome": {"view": True, "edit": False},
    "processo": {"view": True, "edit": False},
    "prazoEntrega": {"view": True, "edit": False},
    "audiencia": {"view": True, "edit": False},
    "status": {"view": True, "edit": False},
    "observacao": {"view": True, "edit": False},
    "canCreateCases": False,
    "canDeleteCases": False,
    "pages": {
        "dashboard": True,
        "cases": True,
        "activityLog": False,
        "users": False,
    },
}


def default_permissions() -> dict:
    return copy.deepcopy(DEFAULT_PERMISSIONS)


class User(Base, BaseModelMixin):
    """Application account."""

    __tablename__ = "users"

    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    profile_image_url = Column(String(500), nullable=True)
    role = Column(String(50), nullable=False, default=UserRole.VIEWER.value)
    # Per-field view/edit flags, page visibility and statusTransitions overrides
    permissions = Column(JSON, nullable=False, default=default_permissions)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def display_name(self) -> str:
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or self.username

    def has_permission(self, key: str) -> bool:
        """Check a boolean flag of the permission map (admins always pass)."""
        if self.is_admin:
            return True
        return bool((self.permissions or {}).get(key, False))
