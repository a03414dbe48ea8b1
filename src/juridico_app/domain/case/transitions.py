"""Status transition side effects."""

from datetime import datetime

from juridico_app.domain.case.exceptions import InvalidCaseStatusException
from juridico_app.domain.case.status import CaseStatus


def apply_status_transition(case, new_status: str | CaseStatus, now: datetime) -> bool:
    """
    Move ``case`` to ``new_status``, stamping or clearing completion fields.

    Entering concluido sets completed_date and data_entrega to ``now``; leaving
    it clears both. Re-applying the current status leaves them untouched.

    Returns:
        True if the stored status changed.
    """
    target = new_status if isinstance(new_status, CaseStatus) else CaseStatus.parse(new_status)
    if target is None:
        raise InvalidCaseStatusException(new_status)

    current = CaseStatus.parse(case.status)
    if current == target:
        return False

    if target == CaseStatus.CONCLUIDO:
        case.completed_date = now
        case.data_entrega = now
    elif current == CaseStatus.CONCLUIDO:
        case.completed_date = None
        case.data_entrega = None

    case.status = target.value
    return True
