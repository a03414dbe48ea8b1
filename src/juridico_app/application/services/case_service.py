"""
Case Service

CRUD and status changes for legal cases. Status changes go through the
transition rule in juridico_app.domain.case so completion timestamps and
permissions are enforced in one place.
"""

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from juridico_app.application.services.activity_service import ActivityService, RequestContext
from juridico_app.domain.case.exceptions import (
    CaseNotFoundException,
    InvalidCaseStatusException,
    PermissionDeniedException,
    StatusTransitionNotAllowedException,
)
from juridico_app.domain.case.permissions import can_change_status, get_status_permissions
from juridico_app.domain.case.status import Bucket, CaseStatus, compute_bucket
from juridico_app.domain.case.transitions import apply_status_transition
from juridico_app.domain.clock import Clock, system_clock
from juridico_app.models.case import Case
from juridico_app.models.user import User
from juridico_app.schemas.case import CaseCreate, CaseUpdate

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "CASE"


class CaseService:
    """Service for case operations."""

    # Fields a non-admin may change through a general update
    NON_ADMIN_EDITABLE_FIELDS = frozenset({"description", "due_date", "assigned_to_id"})

    def __init__(self, db: Session, clock: Clock = system_clock, context: RequestContext | None = None):
        self.db = db
        self.clock = clock
        self.activity = ActivityService(db, clock, context)

    # =========================================================================
    # Queries
    # =========================================================================

    def bucket_for(self, case: Case, now: datetime | None = None) -> Bucket:
        return compute_bucket(case.status, case.due_date, now or self.clock())

    def list_cases(
        self,
        status: str | None = None,
        search: str | None = None,
        bucket: str | None = None,
        order_by: str | None = None,
        limit: int | None = None,
    ) -> list[Case]:
        """
        List cases with optional filters.

        Buckets depend on the current time, so the bucket filter runs after
        the query.
        """
        query = self.db.query(Case)

        if status:
            query = query.filter(Case.status == status)

        if search and search.strip():
            like = f"%{search.strip().lower()}%"
            query = query.filter(
                or_(
                    func.lower(Case.client_name).like(like),
                    func.lower(Case.process_number).like(like),
                )
            )

        if order_by == "recent":
            query = query.order_by(Case.updated_at.desc(), Case.created_at.desc())
        else:
            query = query.order_by(Case.updated_at.desc(), Case.created_at.desc(), Case.client_name.asc())

        cases = query.all()

        if bucket:
            now = self.clock()
            cases = [c for c in cases if self.bucket_for(c, now).value == bucket]

        if limit:
            cases = cases[:limit]
        return cases

    def get_case(self, case_id: UUID) -> Case:
        case = self.db.query(Case).filter(Case.id == case_id).first()
        if not case:
            raise CaseNotFoundException()
        return case

    # =========================================================================
    # Mutations
    # =========================================================================

    def create_case(self, data: CaseCreate, actor: User) -> Case:
        if not (actor.is_admin or actor.has_permission("canCreateCases")):
            raise PermissionDeniedException()

        fields = data.model_dump(exclude={"status"})
        target = data.status

        if target != CaseStatus.NOVO and not can_change_status(actor, None, target.value):
            raise StatusTransitionNotAllowedException("-", target.value, actor.role)

        case = Case(**fields, created_by_id=actor.id)
        apply_status_transition(case, target, self.clock())
        self.db.add(case)
        self.db.flush()

        self.activity.log_activity(
            actor,
            "CREATE_CASE",
            RESOURCE_TYPE,
            case.id,
            f"Criou processo {case.process_number} - Cliente: {case.client_name}",
            {"processNumber": case.process_number, "clientName": case.client_name, "status": case.status},
        )
        self.db.commit()
        self.db.refresh(case)

        logger.info(f"Case created: {case.id}", extra={"case_id": str(case.id), "user_id": str(actor.id)})
        return case

    def update_case(self, case_id: UUID, patch: CaseUpdate, actor: User) -> Case:
        case = self.get_case(case_id)
        fields: dict[str, Any] = patch.model_dump(exclude_unset=True)

        if not get_status_permissions(actor).can_edit_all_cases:
            forbidden = set(fields) - self.NON_ADMIN_EDITABLE_FIELDS
            if forbidden:
                raise PermissionDeniedException("Insufficient permissions to edit these fields")

        previous_status = case.status
        new_status = fields.pop("status", None)
        if new_status is not None:
            self._transition(case, new_status, actor)

        for key, value in fields.items():
            setattr(case, key, value)

        metadata: dict[str, Any] = {"updatedFields": sorted(patch.model_dump(exclude_unset=True))}
        if case.status != previous_status:
            metadata.update({"previousStatus": previous_status, "newStatus": case.status})

        self.activity.log_activity(
            actor,
            "UPDATE_CASE",
            RESOURCE_TYPE,
            case.id,
            f"Editou processo {case.process_number} - Cliente: {case.client_name}",
            metadata,
        )
        self.db.commit()
        self.db.refresh(case)
        return case

    def change_status(self, case_id: UUID, status: str, actor: User) -> Case:
        """
        Move a case to ``status``.

        Raises:
            InvalidCaseStatusException: Unknown status value
            CaseNotFoundException: No case with this id
            StatusTransitionNotAllowedException: The actor's permissions forbid the target status
        """
        if CaseStatus.parse(status) is None:
            raise InvalidCaseStatusException(status)

        case = self.get_case(case_id)
        previous_status = case.status
        self._transition(case, status, actor)

        self.activity.log_activity(
            actor,
            "UPDATE_STATUS",
            RESOURCE_TYPE,
            case.id,
            f'Alterou status do processo {case.process_number} de "{previous_status}" para "{case.status}"',
            {"previousStatus": previous_status, "newStatus": case.status},
        )
        self.db.commit()
        self.db.refresh(case)
        return case

    def delete_case(self, case_id: UUID, actor: User) -> None:
        if not (get_status_permissions(actor).can_delete_cases or actor.has_permission("canDeleteCases")):
            raise PermissionDeniedException()

        case = self.get_case(case_id)
        self.activity.log_activity(
            actor,
            "DELETE_CASE",
            RESOURCE_TYPE,
            case.id,
            f"Excluiu processo {case.process_number}",
            {"processNumber": case.process_number, "clientName": case.client_name},
        )
        self.db.delete(case)
        self.db.commit()

    def _transition(self, case: Case, status: str, actor: User) -> None:
        target = CaseStatus.parse(status)
        if target is None:
            raise InvalidCaseStatusException(status)

        if target.value == case.status:
            return

        if not can_change_status(actor, case.status, target.value):
            logger.warning(
                "Status transition rejected",
                extra={
                    "case_id": str(case.id),
                    "from_status": case.status,
                    "to_status": target.value,
                    "role": actor.role,
                },
            )
            raise StatusTransitionNotAllowedException(case.status, target.value, actor.role)

        apply_status_transition(case, target, self.clock())
