"""Domain exceptions mapped to HTTP responses by the API layer."""


class DomainException(Exception):
    """Base class; ``code`` is stable and safe to show to clients."""

    status_code = 400
    code = "domain_error"

    def __init__(self, message: str | None = None):
        self.message = message or self.__class__.__doc__ or self.code
        super().__init__(self.message)


class InvalidCaseStatusException(DomainException):
    """Invalid status"""

    status_code = 400
    code = "invalid_status"

    def __init__(self, status):
        self.status = status
        super().__init__(f"Invalid status: {status!r}")


class StatusTransitionNotAllowedException(DomainException):
    """Status transition not permitted for this user"""

    status_code = 403
    code = "status_transition_not_allowed"

    def __init__(self, from_status: str, to_status: str, role: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        self.role = role
        super().__init__(f'Transition from "{from_status}" to "{to_status}" is not permitted for role "{role}"')


class PermissionDeniedException(DomainException):
    """Insufficient permissions"""

    status_code = 403
    code = "forbidden"


class NotFoundException(DomainException):
    status_code = 404
    code = "not_found"


class CaseNotFoundException(NotFoundException):
    """Case not found"""


class EmployeeNotFoundException(NotFoundException):
    """Employee not found"""


class UserNotFoundException(NotFoundException):
    """User not found"""


class DuplicateRecordException(DomainException):
    """Record already exists"""

    status_code = 409
    code = "duplicate"
