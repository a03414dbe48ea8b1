"""
Dashboard Service

Read models for the dashboard widgets plus per-user layout persistence.
Every figure that depends on "now" is computed per request.
"""

import logging
from collections import Counter, defaultdict
from datetime import timedelta
from typing import Any

from sqlalchemy.orm import Session

from juridico_app.application.services.activity_service import ActivityService, RequestContext
from juridico_app.domain.case.deadlines import days_until, deadline_priority
from juridico_app.domain.case.status import CaseStatus, compute_bucket, count_by_bucket
from juridico_app.domain.clock import Clock, as_utc, system_clock
from juridico_app.models.case import Case
from juridico_app.models.dashboard_layout import DashboardLayout
from juridico_app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_ALERT_WINDOW_DAYS = 7


class DashboardService:
    def __init__(self, db: Session, clock: Clock = system_clock, context: RequestContext | None = None):
        self.db = db
        self.clock = clock
        self.activity = ActivityService(db, clock, context)

    # =========================================================================
    # Widgets
    # =========================================================================

    def get_stats(self) -> dict[str, Any]:
        """Totals by stored status and by computed bucket."""
        now = self.clock()
        rows = self.db.query(Case.status, Case.due_date).all()

        by_status = Counter(status or "unknown" for status, _ in rows)
        by_bucket = count_by_bucket(compute_bucket(status, due_date, now) for status, due_date in rows)

        return {
            "total": len(rows),
            "by_status": dict(by_status),
            "by_bucket": by_bucket,
        }

    def get_deadline_alerts(self, days: int = DEFAULT_ALERT_WINDOW_DAYS) -> list[dict[str, Any]]:
        """Open cases that are overdue or due within ``days`` days, most urgent first."""
        now = self.clock()
        horizon = as_utc(now).date() + timedelta(days=days)

        cases = (
            self.db.query(Case)
            .filter(
                Case.status != CaseStatus.CONCLUIDO.value,
                Case.due_date.isnot(None),
                Case.due_date <= horizon,
            )
            .all()
        )

        alerts = []
        for case in cases:
            remaining = days_until(case.due_date, now)
            alerts.append({
                "id": case.id,
                "process_number": case.process_number,
                "client_name": case.client_name,
                "due_date": case.due_date,
                "days_remaining": remaining,
                "days_overdue": max(-remaining, 0),
                "priority": deadline_priority(remaining),
            })

        alerts.sort(key=lambda alert: alert["days_remaining"])
        return alerts

    def get_delivery_metrics(self) -> dict[str, Any]:
        """Average days from start (or creation) to delivery of completed cases."""
        cases = (
            self.db.query(Case)
            .filter(
                Case.status == CaseStatus.CONCLUIDO.value,
                Case.data_entrega.isnot(None),
            )
            .all()
        )

        durations: list[int] = []
        by_month: dict[str, list[int]] = defaultdict(list)
        for case in cases:
            delivered = as_utc(case.data_entrega)
            started = as_utc(case.start_date or case.created_at)
            elapsed = max((delivered - started).days, 0)
            durations.append(elapsed)
            by_month[delivered.strftime("%Y-%m")].append(elapsed)

        average = round(sum(durations) / len(durations), 1) if durations else None
        return {
            "total_completed": len(durations),
            "average_days": average,
            "by_month": {
                month: round(sum(values) / len(values), 1) for month, values in sorted(by_month.items())
            },
        }

    # =========================================================================
    # Layout
    # =========================================================================

    def get_layout(self, user: User) -> dict[str, Any]:
        layout = self.db.query(DashboardLayout).filter(DashboardLayout.user_id == user.id).first()
        if not layout:
            return {"id": None, "user_id": user.id, "layout": {}, "widgets": [], "updated_at": None}
        return self._layout_dict(layout)

    def save_layout(
        self,
        user: User,
        layout: dict[str, Any] | None,
        widgets: list[dict[str, Any]] | None,
    ) -> dict[str, Any]:
        current = self.db.query(DashboardLayout).filter(DashboardLayout.user_id == user.id).first()
        if current is None:
            current = DashboardLayout(user_id=user.id)
            self.db.add(current)

        current.layout = layout or {}
        current.widgets = widgets or []
        self.db.flush()

        self.activity.log_activity(
            user,
            "UPDATE_DASHBOARD",
            "DASHBOARD",
            current.id,
            "Personalizou layout do dashboard",
            {"widgetCount": len(current.widgets)},
        )
        self.db.commit()
        self.db.refresh(current)
        return self._layout_dict(current)

    @staticmethod
    def _layout_dict(layout: DashboardLayout) -> dict[str, Any]:
        return {
            "id": layout.id,
            "user_id": layout.user_id,
            "layout": layout.layout or {},
            "widgets": layout.widgets or [],
            "updated_at": layout.updated_at,
        }
