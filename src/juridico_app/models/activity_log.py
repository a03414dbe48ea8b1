"""Activity log - append-only audit trail of mutating operations."""

from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, String, Text, Uuid

from juridico_app.core.database import Base
from juridico_app.models.base import utcnow


class ActivityLog(Base):
    """
    One audit entry.

    Rows are never updated, so there is no updated_at column.
    """

    __tablename__ = "activity_log"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    action = Column(String(100), nullable=False)  # CREATE_CASE, UPDATE_STATUS, ...
    resource_type = Column(String(50), nullable=False)  # CASE, EMPLOYEE, USER, DASHBOARD
    resource_id = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    details = Column("metadata", JSON, nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index("idx_activity_log_created", "created_at"),
        Index("idx_activity_log_action", "action"),
    )
