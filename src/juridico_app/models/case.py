"""Case model - one legal matter (processo)."""

from sqlalchemy import JSON, Column, Date, DateTime, ForeignKey, Index, String, Text, Uuid

from juridico_app.core.database import Base
from juridico_app.domain.case.status import CaseStatus
from juridico_app.models.base import BaseModelMixin


class Case(Base, BaseModelMixin):
    """
    Legal case.

    completed_date and data_entrega are set if and only if status is concluido;
    see juridico_app.domain.case.transitions.
    """

    __tablename__ = "cases"

    client_name = Column(String(255), nullable=False)
    process_number = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default=CaseStatus.NOVO.value)
    start_date = Column(DateTime(timezone=True), nullable=True)
    due_date = Column(Date, nullable=True)
    data_audiencia = Column(DateTime(timezone=True), nullable=True)
    completed_date = Column(DateTime(timezone=True), nullable=True)
    data_entrega = Column(DateTime(timezone=True), nullable=True)
    matricula = Column(String(50), nullable=True)
    tipo_processo = Column(String(255), nullable=True)  # trabalhista, rescisao_indireta, dano_moral...
    documentos_solicitados = Column(JSON, nullable=True)
    observacoes = Column(Text, nullable=True)

    employee_id = Column(Uuid(as_uuid=True), ForeignKey("employees.id", ondelete="SET NULL"), nullable=True)
    assigned_to_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_by_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    __table_args__ = (
        Index("idx_cases_status", "status"),
        Index("idx_cases_due_date", "due_date"),
    )
