"""User management endpoints (admin only)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response

from juridico_app.application.services import UserService
from juridico_app.models.user import User
from juridico_app.schemas.user import UserCreate, UserOut, UserUpdate
from juridico_app.web.deps import get_user_service, require_admin

users_router = APIRouter()


@users_router.get("", response_model=list[UserOut])
def list_users(
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return service.list_users()


@users_router.post("", response_model=UserOut, status_code=201)
def create_user(
    payload: UserCreate,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return service.create_user(payload, admin)


@users_router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: UUID,
    payload: UserUpdate,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return service.update_user(user_id, payload, admin)


@users_router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    service.delete_user(user_id, admin)
    return Response(status_code=204)
