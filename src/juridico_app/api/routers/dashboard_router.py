"""Dashboard widgets and per-user layout."""

from fastapi import APIRouter, Depends, Query

from juridico_app.application.services import DashboardService
from juridico_app.application.services.dashboard_service import DEFAULT_ALERT_WINDOW_DAYS
from juridico_app.models.user import User
from juridico_app.schemas.dashboard import DashboardStats, DeadlineAlert, DeliveryMetrics, LayoutIn, LayoutOut
from juridico_app.web.deps import get_current_user, get_dashboard_service

dashboard_router = APIRouter()


@dashboard_router.get("/stats", response_model=DashboardStats)
def stats(
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.get_stats()


@dashboard_router.get("/deadlines", response_model=list[DeadlineAlert])
def deadlines(
    days: int = Query(DEFAULT_ALERT_WINDOW_DAYS, ge=0, le=365),
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.get_deadline_alerts(days)


@dashboard_router.get("/delivery-time", response_model=DeliveryMetrics)
def delivery_time(
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.get_delivery_metrics()


@dashboard_router.get("/layout", response_model=LayoutOut)
def get_layout(
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.get_layout(user)


@dashboard_router.post("/layout", response_model=LayoutOut)
def save_layout(
    payload: LayoutIn,
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.save_layout(user, payload.layout, payload.widgets)
