from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal
from uuid import UUID

from pydantic import Field, field_validator

from juridico_app.schemas.base import ApiModel
from juridico_app.utils.normalize import coerce_br_date, parse_br_money


def _coerce_money(value: Any) -> Any:
    if isinstance(value, str):
        parsed = parse_br_money(value)
        # leave garbage as-is so pydantic reports it
        return parsed if parsed is not None or value.strip() == "" else value
    return value


class EmployeeBase(ApiModel):
    empresa: str | None = None
    rg: str | None = None
    pis: str | None = None
    data_admissao: date | None = None
    data_demissao: date | None = None
    salario: Decimal | None = None
    cargo: str | None = None
    centro_custo: str | None = None
    departamento: str | None = None

    @field_validator("data_admissao", "data_demissao", mode="before")
    @classmethod
    def parse_dates(cls, value):
        return coerce_br_date(value)

    @field_validator("salario", mode="before")
    @classmethod
    def parse_salario(cls, value):
        return _coerce_money(value)

    @field_validator("empresa", mode="before")
    @classmethod
    def empresa_as_text(cls, value):
        # company codes arrive as numbers from spreadsheets
        return str(value) if isinstance(value, int) else value


class EmployeeCreate(EmployeeBase):
    nome: str = Field(..., min_length=1, max_length=255)
    matricula: str = Field(..., min_length=1, max_length=50)


class EmployeeUpdate(EmployeeBase):
    nome: str | None = Field(None, min_length=1, max_length=255)
    matricula: str | None = Field(None, min_length=1, max_length=50)
    # deletion goes through DELETE, not a status patch
    status: Literal["ativo", "inativo"] | None = None


class EmployeeOut(EmployeeBase):
    id: UUID
    nome: str
    matricula: str
    status: str
    created_at: datetime
    updated_at: datetime
