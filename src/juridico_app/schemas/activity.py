from datetime import datetime
from typing import Any
from uuid import UUID

from juridico_app.schemas.base import ApiModel


class ActivityActor(ApiModel):
    id: UUID | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class ActivityLogOut(ApiModel):
    id: UUID
    action: str
    resource_type: str
    resource_id: str
    description: str
    metadata: dict[str, Any] | None = None
    ip_address: str | None = None
    created_at: datetime
    actor: ActivityActor
