"""Activity log listing (admin only)."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from juridico_app.application.services import ActivityService
from juridico_app.models.user import User
from juridico_app.schemas.activity import ActivityLogOut
from juridico_app.web.deps import get_activity_service, require_admin

activity_router = APIRouter()


@activity_router.get("", response_model=list[ActivityLogOut])
def list_activity_logs(
    action: Optional[str] = Query(None),
    day: Optional[date] = Query(None, alias="date"),
    search: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    process_only: bool = Query(False, alias="processOnly"),
    admin: User = Depends(require_admin),
    service: ActivityService = Depends(get_activity_service),
):
    return service.list_activity_logs(
        action=action,
        day=day,
        search=search,
        limit=limit,
        process_only=process_only,
    )
