"""Case payloads."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator

from juridico_app.domain.case.status import Bucket, CaseStatus
from juridico_app.schemas.base import ApiModel
from juridico_app.utils.normalize import coerce_br_date

DATE_FIELDS = ("due_date",)
DATETIME_FIELDS = ("start_date", "data_audiencia")


def _coerce_br_datetime(value: Any) -> Any:
    parsed = coerce_br_date(value)
    if isinstance(parsed, date) and not isinstance(parsed, datetime):
        return datetime(parsed.year, parsed.month, parsed.day)
    return parsed


class CaseCreate(ApiModel):
    client_name: str = Field(..., min_length=1, max_length=255)
    process_number: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    status: CaseStatus = CaseStatus.NOVO
    start_date: datetime | None = None
    due_date: date | None = None
    data_audiencia: datetime | None = None
    matricula: str | None = None
    tipo_processo: str | None = None
    documentos_solicitados: list[str] | None = None
    observacoes: str | None = None
    employee_id: UUID | None = None
    assigned_to_id: UUID | None = None

    @field_validator(*DATE_FIELDS, mode="before")
    @classmethod
    def parse_dates(cls, value):
        return coerce_br_date(value)

    @field_validator(*DATETIME_FIELDS, mode="before")
    @classmethod
    def parse_datetimes(cls, value):
        return _coerce_br_datetime(value)


class CaseUpdate(ApiModel):
    """Partial update; only fields present in the request are applied."""

    client_name: str | None = Field(None, min_length=1, max_length=255)
    process_number: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = None
    start_date: datetime | None = None
    due_date: date | None = None
    data_audiencia: datetime | None = None
    matricula: str | None = None
    tipo_processo: str | None = None
    documentos_solicitados: list[str] | None = None
    observacoes: str | None = None
    employee_id: UUID | None = None
    assigned_to_id: UUID | None = None

    @field_validator(*DATE_FIELDS, mode="before")
    @classmethod
    def parse_dates(cls, value):
        return coerce_br_date(value)

    @field_validator(*DATETIME_FIELDS, mode="before")
    @classmethod
    def parse_datetimes(cls, value):
        return _coerce_br_datetime(value)

    @field_validator("client_name", "process_number", "description")
    @classmethod
    def required_not_null(cls, value):
        # only runs when the field is sent explicitly
        if value is None:
            raise ValueError("cannot be null")
        return value


class CaseStatusUpdate(ApiModel):
    # Validated by the service so bad values get the invalid_status code
    status: str


class CaseOut(ApiModel):
    id: UUID
    client_name: str
    process_number: str
    description: str
    status: str
    bucket: Bucket
    start_date: datetime | None = None
    due_date: date | None = None
    data_audiencia: datetime | None = None
    completed_date: datetime | None = None
    data_entrega: datetime | None = None
    matricula: str | None = None
    tipo_processo: str | None = None
    documentos_solicitados: list[str] | None = None
    observacoes: str | None = None
    employee_id: UUID | None = None
    assigned_to_id: UUID | None = None
    created_by_id: UUID | None = None
    created_at: datetime
    updated_at: datetime
