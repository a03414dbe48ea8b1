"""Case endpoints."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from juridico_app.application.services import CaseService
from juridico_app.domain.case.status import Bucket
from juridico_app.models.case import Case
from juridico_app.models.user import User
from juridico_app.schemas.case import CaseCreate, CaseOut, CaseStatusUpdate, CaseUpdate
from juridico_app.web.deps import get_case_service, get_current_user

cases_router = APIRouter()


def to_case_out(case: Case, service: CaseService, now: Optional[datetime] = None) -> CaseOut:
    """Serialize a case together with its bucket for the service's current time."""
    fields = {column.key: getattr(case, column.key) for column in Case.__table__.columns}
    fields["bucket"] = service.bucket_for(case, now)
    return CaseOut.model_validate(fields)


@cases_router.get("", response_model=list[CaseOut])
def list_cases(
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    bucket: Optional[Bucket] = Query(None),
    order_by: Optional[str] = Query(None, alias="orderBy"),
    limit: Optional[int] = Query(None, ge=1),
    user: User = Depends(get_current_user),
    service: CaseService = Depends(get_case_service),
):
    cases = service.list_cases(
        status=status,
        search=search,
        bucket=bucket.value if bucket else None,
        order_by=order_by,
        limit=limit,
    )
    now = service.clock()
    return [to_case_out(case, service, now) for case in cases]


@cases_router.post("", response_model=CaseOut, status_code=201)
def create_case(
    payload: CaseCreate,
    user: User = Depends(get_current_user),
    service: CaseService = Depends(get_case_service),
):
    return to_case_out(service.create_case(payload, user), service)


@cases_router.get("/{case_id}", response_model=CaseOut)
def get_case(
    case_id: UUID,
    user: User = Depends(get_current_user),
    service: CaseService = Depends(get_case_service),
):
    return to_case_out(service.get_case(case_id), service)


@cases_router.patch("/{case_id}", response_model=CaseOut)
def update_case(
    case_id: UUID,
    payload: CaseUpdate,
    user: User = Depends(get_current_user),
    service: CaseService = Depends(get_case_service),
):
    return to_case_out(service.update_case(case_id, payload, user), service)


@cases_router.patch("/{case_id}/status", response_model=CaseOut)
def change_case_status(
    case_id: UUID,
    payload: CaseStatusUpdate,
    user: User = Depends(get_current_user),
    service: CaseService = Depends(get_case_service),
):
    return to_case_out(service.change_status(case_id, payload.status, user), service)


@cases_router.delete("/{case_id}", status_code=204)
def delete_case(
    case_id: UUID,
    user: User = Depends(get_current_user),
    service: CaseService = Depends(get_case_service),
):
    service.delete_case(case_id, user)
    return Response(status_code=204)
