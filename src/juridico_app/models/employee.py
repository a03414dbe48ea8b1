"""Employee model - company staff records referenced by cases."""

from enum import Enum

from sqlalchemy import Column, Date, Index, Numeric, String

from juridico_app.core.database import Base
from juridico_app.models.base import BaseModelMixin


class EmployeeStatus(str, Enum):
    ATIVO = "ativo"
    INATIVO = "inativo"
    DELETADO = "deletado"


class Employee(Base, BaseModelMixin):
    """Funcionário. Soft-deleted via status = deletado."""

    __tablename__ = "employees"

    empresa = Column(String(10), nullable=True)  # company code (2, 33, 55...)
    nome = Column(String(255), nullable=False)
    matricula = Column(String(50), unique=True, nullable=False, index=True)
    rg = Column(String(20), nullable=True)
    pis = Column(String(20), nullable=True)
    data_admissao = Column(Date, nullable=True)
    data_demissao = Column(Date, nullable=True)
    salario = Column(Numeric(10, 2), nullable=True)
    cargo = Column(String(255), nullable=True)
    centro_custo = Column(String(255), nullable=True)
    departamento = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=EmployeeStatus.ATIVO.value)

    __table_args__ = (Index("idx_employees_status_nome", "status", "nome"),)
