"""
Case status values and deadline buckets.

A bucket is the urgency classification shown on lists and dashboards. It is
derived from (status, due date, now) every time and never stored.
"""

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Iterable

from juridico_app.domain.clock import as_utc


class CaseStatus(str, Enum):
    """Stored status of a case."""

    NOVO = "novo"
    ANDAMENTO = "andamento"
    PENDENTE = "pendente"
    CONCLUIDO = "concluido"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | None) -> "CaseStatus | None":
        """Return the matching status or None for unknown values."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Bucket(str, Enum):
    """Urgency bucket derived from status and due date."""

    NOVO = "novo"
    PENDENTE = "pendente"
    ATRASADO = "atrasado"
    CONCLUIDO = "concluido"

    def __str__(self) -> str:
        return self.value


def is_overdue(due_date: date | datetime | None, now: datetime) -> bool:
    """
    True when the due date is strictly before now.

    A plain date counts from midnight UTC, so a case due today is already
    overdue once the day has started.
    """
    if due_date is None:
        return False
    if isinstance(due_date, datetime):
        return as_utc(due_date) < as_utc(now)
    return datetime.combine(due_date, time.min, tzinfo=timezone.utc) < as_utc(now)


def compute_bucket(status: str | None, due_date: date | datetime | None, now: datetime) -> Bucket:
    """Classify a case into its urgency bucket."""
    normalized = (status or "").strip().lower()
    if normalized == CaseStatus.CONCLUIDO.value:
        return Bucket.CONCLUIDO

    if is_overdue(due_date, now):
        return Bucket.ATRASADO

    if normalized == CaseStatus.NOVO.value:
        return Bucket.NOVO
    return Bucket.PENDENTE


def count_by_bucket(buckets: Iterable[Bucket]) -> dict[str, int]:
    counts = {"total": 0, **{bucket.value: 0 for bucket in Bucket}}
    for bucket in buckets:
        counts["total"] += 1
        counts[Bucket(bucket).value] += 1
    return counts
