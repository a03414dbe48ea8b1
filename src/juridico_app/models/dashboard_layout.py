"""Per-user dashboard customization."""

from sqlalchemy import JSON, Column, ForeignKey, Uuid

from juridico_app.core.database import Base
from juridico_app.models.base import BaseModelMixin


class DashboardLayout(Base, BaseModelMixin):
    __tablename__ = "dashboard_layouts"

    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True
    )
    layout = Column(JSON, nullable=False, default=dict)
    widgets = Column(JSON, nullable=False, default=list)
