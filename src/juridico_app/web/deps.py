"""Web-specific dependencies for cookie-based authentication."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from juridico_app.application.services import (
    ActivityService,
    CaseService,
    DashboardService,
    EmployeeService,
    RequestContext,
    UserService,
)
from juridico_app.core.config import get_settings
from juridico_app.core.database import get_db
from juridico_app.core.security import decode_access_token
from juridico_app.domain.clock import Clock, get_clock
from juridico_app.models.user import User

logger = logging.getLogger(__name__)


def get_request_context(request: Request) -> RequestContext:
    """Client address and user agent recorded on activity log entries."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        ip_address = forwarded.split(",")[0].strip()
    else:
        ip_address = request.client.host if request.client else None
    return RequestContext(ip_address=ip_address, user_agent=request.headers.get("user-agent"))


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    """
    Get current user from cookie if present and valid.
    Returns None if not authenticated (doesn't raise exception).
    """
    token = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    if not token:
        return None

    payload = decode_access_token(token)
    if payload is None:
        return None

    user_id: Optional[str] = payload.get("sub")
    if not user_id:
        return None

    try:
        user_uuid = UUID(user_id)
    except ValueError:
        return None

    return db.query(User).filter(User.id == user_uuid).first()


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Require an authenticated user."""
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        logger.warning("Admin route denied", extra={"user_id": str(user.id), "role": user.role})
        raise HTTPException(status_code=403, detail="Admin access required")
    return user


# =============================================================================
# Service factories
# =============================================================================

def get_case_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    context: RequestContext = Depends(get_request_context),
) -> CaseService:
    return CaseService(db, clock, context)


def get_employee_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    context: RequestContext = Depends(get_request_context),
) -> EmployeeService:
    return EmployeeService(db, clock, context)


def get_user_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    context: RequestContext = Depends(get_request_context),
) -> UserService:
    return UserService(db, clock, context)


def get_activity_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> ActivityService:
    return ActivityService(db, clock)


def get_dashboard_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    context: RequestContext = Depends(get_request_context),
) -> DashboardService:
    return DashboardService(db, clock, context)
