"""
Application services.

Each service wraps a SQLAlchemy session; mutating calls commit and append one
activity log entry.
"""

from juridico_app.application.services.activity_service import ActivityService, RequestContext
from juridico_app.application.services.case_service import CaseService
from juridico_app.application.services.dashboard_service import DashboardService
from juridico_app.application.services.employee_service import EmployeeService
from juridico_app.application.services.user_service import UserService

__all__ = [
    "ActivityService",
    "RequestContext",
    "CaseService",
    "DashboardService",
    "EmployeeService",
    "UserService",
]
