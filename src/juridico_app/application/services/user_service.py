"""User Service - account management and authentication."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from juridico_app.application.services.activity_service import ActivityService, RequestContext
from juridico_app.core.config import get_settings
from juridico_app.core.security import get_password_hash, verify_password
from juridico_app.domain.case.exceptions import (
    DuplicateRecordException,
    PermissionDeniedException,
    UserNotFoundException,
)
from juridico_app.domain.clock import Clock, system_clock
from juridico_app.models.user import User, default_permissions
from juridico_app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "USER"


class UserService:
    """Service for application accounts."""

    def __init__(self, db: Session, clock: Clock = system_clock, context: RequestContext | None = None):
        self.db = db
        self.activity = ActivityService(db, clock, context)

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_user(self, user_id: UUID) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise UserNotFoundException()
        return user

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user when the credentials match, else None."""
        user = self.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            return None

        # Move accounts imported with legacy scrypt hashes to bcrypt
        if not user.password_hash.startswith("$2"):
            user.password_hash = get_password_hash(password)
            self.db.commit()
            logger.info("Upgraded legacy password hash", extra={"user_id": str(user.id)})

        return user

    # =========================================================================
    # Mutations
    # =========================================================================

    def create_user(self, data: UserCreate, actor: User | None) -> User:
        if self.get_by_username(data.username):
            raise DuplicateRecordException(f'Usuário "{data.username}" já existe')
        if data.email and self.get_by_email(data.email):
            raise DuplicateRecordException(f'Email "{data.email}" já está em uso')

        password = data.password if data.password and data.password.strip() else get_settings().DEFAULT_USER_PASSWORD
        permissions = default_permissions()
        permissions.update(data.permissions or {})

        user = User(
            username=data.username,
            email=data.email or None,
            password_hash=get_password_hash(password),
            first_name=data.first_name or None,
            last_name=data.last_name or None,
            role=data.role.value,
            permissions=permissions,
        )
        self.db.add(user)
        self.db.flush()

        self.activity.log_activity(
            actor,
            "CREATE_USER",
            RESOURCE_TYPE,
            user.id,
            f"Criou usuário {user.username}",
            {"role": user.role},
        )
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_user(self, user_id: UUID, patch: UserUpdate, actor: User) -> User:
        user = self.get_user(user_id)
        fields: dict[str, Any] = patch.model_dump(exclude_unset=True)

        password = fields.pop("password", None)
        if password and password.strip():
            user.password_hash = get_password_hash(password)

        username = fields.pop("username", None)
        if username and username != user.username:
            if self.get_by_username(username):
                raise DuplicateRecordException(f'Usuário "{username}" já existe')
            user.username = username

        if "email" in fields:
            email = fields.pop("email") or None
            if email and email != user.email and self.get_by_email(email):
                raise DuplicateRecordException(f'Email "{email}" já está em uso')
            user.email = email

        role = fields.pop("role", None)
        if role is not None:
            user.role = role.value

        permissions = fields.pop("permissions", None)
        if permissions is not None:
            user.permissions = permissions

        for key, value in fields.items():
            setattr(user, key, value)

        self.activity.log_activity(
            actor,
            "UPDATE_USER",
            RESOURCE_TYPE,
            user.id,
            f"Atualizou usuário {user.username}",
            {"updatedFields": sorted(patch.model_dump(exclude_unset=True))},
        )
        self.db.commit()
        self.db.refresh(user)
        return user

    def set_status_overrides(self, user_id: UUID, overrides: dict[str, bool], actor: User | None) -> User:
        """Replace the per-user status transition overrides."""
        user = self.get_user(user_id)
        permissions = dict(user.permissions or {})
        permissions["statusTransitions"] = dict(overrides)
        # reassign so the JSON column is marked dirty
        user.permissions = permissions

        self.activity.log_activity(
            actor,
            "UPDATE_USER",
            RESOURCE_TYPE,
            user.id,
            f"Alterou permissões de status do usuário {user.username}",
            {"statusTransitions": overrides},
        )
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete_user(self, user_id: UUID, actor: User) -> None:
        if actor.id == user_id:
            raise PermissionDeniedException("Cannot delete your own account")

        user = self.get_user(user_id)
        self.activity.log_activity(
            actor,
            "DELETE_USER",
            RESOURCE_TYPE,
            user.id,
            f"Excluiu usuário {user.username}",
        )
        self.db.delete(user)
        self.db.commit()
