"""Employee Service - CRUD with soft delete."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from juridico_app.application.services.activity_service import ActivityService, RequestContext
from juridico_app.domain.case.exceptions import DuplicateRecordException, EmployeeNotFoundException
from juridico_app.domain.clock import Clock, system_clock
from juridico_app.models.employee import Employee, EmployeeStatus
from juridico_app.models.user import User
from juridico_app.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "EMPLOYEE"

SEARCH_COLUMNS = {
    "nome": (Employee.nome,),
    "codigo": (Employee.matricula,),
    "rg": (Employee.rg,),
    "pis": (Employee.pis,),
}


class EmployeeService:
    """Service for employee records."""

    def __init__(self, db: Session, clock: Clock = system_clock, context: RequestContext | None = None):
        self.db = db
        self.activity = ActivityService(db, clock, context)

    def list_employees(
        self,
        search: str | None = None,
        search_type: str | None = None,
        include_deleted: bool = False,
    ) -> list[Employee]:
        """
        List employees ordered by name.

        ``search_type`` picks the column (nome, codigo, rg, pis); by default
        the term matches name or matricula.
        """
        query = self.db.query(Employee)

        if not include_deleted:
            query = query.filter(Employee.status != EmployeeStatus.DELETADO.value)

        if search and search.strip():
            like = f"%{search.strip().lower()}%"
            columns = SEARCH_COLUMNS.get(search_type or "", (Employee.nome, Employee.matricula))
            query = query.filter(or_(*(func.lower(column).like(like) for column in columns)))

        return query.order_by(Employee.nome.asc()).all()

    def get_employee(self, employee_id: UUID) -> Employee:
        employee = (
            self.db.query(Employee)
            .filter(
                Employee.id == employee_id,
                Employee.status != EmployeeStatus.DELETADO.value,
            )
            .first()
        )
        if not employee:
            raise EmployeeNotFoundException("Funcionário não encontrado")
        return employee

    def create_employee(self, data: EmployeeCreate, actor: User) -> Employee:
        self._ensure_unique_matricula(data.matricula)

        employee = Employee(**data.model_dump(), status=EmployeeStatus.ATIVO.value)
        self.db.add(employee)
        self.db.flush()

        self.activity.log_activity(
            actor,
            "CREATE_EMPLOYEE",
            RESOURCE_TYPE,
            employee.id,
            f"Criou funcionário {employee.nome} - Matrícula: {employee.matricula}",
        )
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def update_employee(self, employee_id: UUID, patch: EmployeeUpdate, actor: User) -> Employee:
        employee = self.get_employee(employee_id)
        fields: dict[str, Any] = patch.model_dump(exclude_unset=True)

        # explicit nulls on required columns are ignored
        for key in ("nome", "matricula", "status"):
            if key in fields and fields[key] is None:
                fields.pop(key)

        if "matricula" in fields and fields["matricula"] != employee.matricula:
            self._ensure_unique_matricula(fields["matricula"])

        for key, value in fields.items():
            setattr(employee, key, value)

        self.activity.log_activity(
            actor,
            "UPDATE_EMPLOYEE",
            RESOURCE_TYPE,
            employee.id,
            f"Atualizou funcionário {employee.nome}",
            {"updatedFields": sorted(fields)},
        )
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def delete_employee(self, employee_id: UUID, actor: User) -> Employee:
        """Soft delete: the row stays with status = deletado."""
        employee = self.get_employee(employee_id)
        employee.status = EmployeeStatus.DELETADO.value

        self.activity.log_activity(
            actor,
            "DELETE_EMPLOYEE",
            RESOURCE_TYPE,
            employee.id,
            f"Removeu funcionário {employee.nome}",
        )
        self.db.commit()
        return employee

    def _ensure_unique_matricula(self, matricula: str) -> None:
        # deleted rows still hold their matricula
        exists = self.db.query(Employee.id).filter(Employee.matricula == matricula).first()
        if exists:
            raise DuplicateRecordException("Matrícula já existe")
