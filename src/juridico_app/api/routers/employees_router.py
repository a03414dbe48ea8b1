"""Employee endpoints; any authenticated user may manage employees."""

from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from juridico_app.application.services import EmployeeService
from juridico_app.models.user import User
from juridico_app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from juridico_app.web.deps import get_current_user, get_employee_service

employees_router = APIRouter()


@employees_router.get("", response_model=list[EmployeeOut])
def list_employees(
    search: Optional[str] = Query(None),
    search_type: Optional[Literal["nome", "codigo", "rg", "pis"]] = Query(None, alias="searchType"),
    include_deleted: bool = Query(False, alias="includeDeleted"),
    user: User = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.list_employees(search=search, search_type=search_type, include_deleted=include_deleted)


@employees_router.post("", response_model=EmployeeOut, status_code=201)
def create_employee(
    payload: EmployeeCreate,
    user: User = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.create_employee(payload, user)


@employees_router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(
    employee_id: UUID,
    user: User = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.get_employee(employee_id)


@employees_router.patch("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: UUID,
    payload: EmployeeUpdate,
    user: User = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.update_employee(employee_id, payload, user)


@employees_router.delete("/{employee_id}")
def delete_employee(
    employee_id: UUID,
    user: User = Depends(get_current_user),
    service: EmployeeService = Depends(get_employee_service),
):
    service.delete_employee(employee_id, user)
    return {"message": "Funcionário removido com sucesso"}
