"""
Activity Log Service

Append-only audit trail. Every mutating service call writes exactly one entry
in the same transaction as the change it describes.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from sqlalchemy import or_, func
from sqlalchemy.orm import Session

from juridico_app.domain.clock import Clock, system_clock
from juridico_app.models.activity_log import ActivityLog
from juridico_app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 200


@dataclass
class RequestContext:
    """Request metadata recorded alongside each audit entry."""

    ip_address: str | None = None
    user_agent: str | None = None


class ActivityService:
    """Writes and queries activity log entries."""

    def __init__(self, db: Session, clock: Clock = system_clock, context: RequestContext | None = None):
        self.db = db
        self.clock = clock
        self.context = context or RequestContext()

    def log_activity(
        self,
        actor: User | None,
        action: str,
        resource_type: str,
        resource_id: Any,
        description: str,
        metadata: dict[str, Any] | None = None,
    ) -> ActivityLog:
        """
        Stage an audit entry on the current session.

        The caller commits; a failed commit drops the entry together with the
        change it describes.
        """
        entry = ActivityLog(
            user_id=actor.id if actor is not None else None,
            action=action,
            resource_type=resource_type,
            resource_id=str(resource_id),
            description=description,
            details=metadata,
            ip_address=self.context.ip_address,
            user_agent=self.context.user_agent,
            created_at=self.clock(),
        )
        self.db.add(entry)
        logger.info(
            "Activity logged",
            extra={
                "action": action,
                "resource_type": resource_type,
                "resource_id": str(resource_id),
                "user_id": str(actor.id) if actor is not None else None,
            },
        )
        return entry

    def list_activity_logs(
        self,
        action: str | None = None,
        day: date | None = None,
        search: str | None = None,
        limit: int | None = None,
        process_only: bool = False,
    ) -> list[dict[str, Any]]:
        """
        List entries newest first, each joined with its actor.

        Args:
            action: Exact action filter (e.g. "UPDATE_STATUS")
            day: Only entries created on this UTC day
            search: Case-insensitive match on action, resource type or description
            limit: Maximum rows (default 200)
            process_only: Only entries about cases
        """
        query = self.db.query(ActivityLog, User).outerjoin(User, User.id == ActivityLog.user_id)

        if action:
            query = query.filter(ActivityLog.action == action)

        if process_only:
            query = query.filter(ActivityLog.resource_type == "CASE")

        if day:
            start = datetime.combine(day, time.min, tzinfo=timezone.utc)
            query = query.filter(
                ActivityLog.created_at >= start,
                ActivityLog.created_at < start + timedelta(days=1),
            )

        if search and search.strip():
            like = f"%{search.strip().lower()}%"
            query = query.filter(
                or_(
                    func.lower(ActivityLog.action).like(like),
                    func.lower(ActivityLog.resource_type).like(like),
                    func.lower(ActivityLog.description).like(like),
                )
            )

        limit = limit if limit and limit > 0 else DEFAULT_LIMIT
        rows = query.order_by(ActivityLog.created_at.desc()).limit(limit).all()

        return [
            {
                "id": entry.id,
                "action": entry.action,
                "resource_type": entry.resource_type,
                "resource_id": entry.resource_id,
                "description": entry.description,
                "metadata": entry.details,
                "ip_address": entry.ip_address,
                "created_at": entry.created_at,
                "actor": {
                    "id": entry.user_id,
                    "username": user.username if user else None,
                    "first_name": user.first_name if user else None,
                    "last_name": user.last_name if user else None,
                },
            }
            for entry, user in rows
        ]
