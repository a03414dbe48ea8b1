from juridico_app.domain.case.exceptions import (
    CaseNotFoundException,
    DomainException,
    DuplicateRecordException,
    EmployeeNotFoundException,
    InvalidCaseStatusException,
    PermissionDeniedException,
    StatusTransitionNotAllowedException,
    UserNotFoundException,
)
from juridico_app.domain.case.permissions import StatusPermissions, can_change_status, get_status_permissions
from juridico_app.domain.case.status import Bucket, CaseStatus, compute_bucket, count_by_bucket
from juridico_app.domain.case.transitions import apply_status_transition

__all__ = [
    "Bucket",
    "CaseStatus",
    "compute_bucket",
    "count_by_bucket",
    "StatusPermissions",
    "get_status_permissions",
    "can_change_status",
    "apply_status_transition",
    "DomainException",
    "InvalidCaseStatusException",
    "StatusTransitionNotAllowedException",
    "PermissionDeniedException",
    "CaseNotFoundException",
    "EmployeeNotFoundException",
    "UserNotFoundException",
    "DuplicateRecordException",
]
