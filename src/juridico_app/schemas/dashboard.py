from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from juridico_app.schemas.base import ApiModel


class BucketCounts(ApiModel):
    total: int = 0
    novo: int = 0
    pendente: int = 0
    atrasado: int = 0
    concluido: int = 0


class DashboardStats(ApiModel):
    total: int
    by_status: dict[str, int]
    by_bucket: BucketCounts


class DeadlineAlert(ApiModel):
    id: UUID
    process_number: str
    client_name: str
    due_date: date
    days_remaining: int
    days_overdue: int
    priority: str


class DeliveryMetrics(ApiModel):
    total_completed: int
    average_days: float | None = None
    by_month: dict[str, float] = Field(default_factory=dict)


class LayoutIn(ApiModel):
    layout: dict[str, Any] | None = None
    widgets: list[dict[str, Any]] | None = None


class LayoutOut(ApiModel):
    id: UUID | None = None
    user_id: UUID
    layout: dict[str, Any]
    widgets: list[dict[str, Any]]
    updated_at: datetime | None = None
