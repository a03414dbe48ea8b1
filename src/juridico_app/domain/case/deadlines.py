from datetime import date, datetime

from juridico_app.domain.clock import as_utc


def days_until(due_date: date | datetime, now: datetime) -> int:
    """Whole days from today to the due date; negative when overdue."""
    if isinstance(due_date, datetime):
        due_date = as_utc(due_date).date()
    return (due_date - as_utc(now).date()).days


def deadline_priority(days: int) -> str:
    if days <= 0:
        return "high"
    if days <= 3:
        return "medium"
    return "low"
