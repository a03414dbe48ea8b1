"""Login, logout and current-user endpoints (httpOnly JWT cookie)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from juridico_app.application.services import UserService
from juridico_app.core.config import get_settings
from juridico_app.core.security import create_access_token
from juridico_app.domain.case.permissions import get_status_permissions
from juridico_app.models.user import User
from juridico_app.schemas.user import CurrentUserOut, LoginRequest, UserOut
from juridico_app.web.deps import get_current_user, get_user_service

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["auth"])


def to_current_user_out(user: User) -> CurrentUserOut:
    fields = UserOut.model_validate(user).model_dump()
    return CurrentUserOut(**fields, status_permissions=get_status_permissions(user).to_dict())


@auth_router.post("/login", response_model=CurrentUserOut)
def login(
    payload: LoginRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    user = service.authenticate(payload.username, payload.password)
    if user is None:
        logger.warning("Failed login", extra={"username": payload.username})
        raise HTTPException(status_code=401, detail="Invalid credentials")

    settings = get_settings()
    token = create_access_token({"sub": str(user.id), "role": user.role})
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    logger.info(f"User logged in: {user.username}", extra={"user_id": str(user.id)})
    return to_current_user_out(user)


@auth_router.post("/logout")
def logout(response: Response):
    response.delete_cookie(get_settings().SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


@auth_router.get("/user", response_model=CurrentUserOut)
def current_user(user: User = Depends(get_current_user)):
    return to_current_user_out(user)
