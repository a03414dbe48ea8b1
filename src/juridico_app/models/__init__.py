"""
Database models.

Importing this package registers every table on Base.metadata.
"""

from juridico_app.models.activity_log import ActivityLog
from juridico_app.models.case import Case
from juridico_app.models.dashboard_layout import DashboardLayout
from juridico_app.models.employee import Employee, EmployeeStatus
from juridico_app.models.user import DEFAULT_PERMISSIONS, User, UserRole, default_permissions

__all__ = [
    "ActivityLog",
    "Case",
    "DashboardLayout",
    "Employee",
    "EmployeeStatus",
    "User",
    "UserRole",
    "DEFAULT_PERMISSIONS",
    "default_permissions",
]
