# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import (
    employee, admin, leave_event, leave_summary, event, employee_document
)

# Explicit class exports for cleaner imports
from .employee import Employee
from .admin import Admin
from .leave_event import LeaveEvent
from .leave_summary import LeaveSummary, LEAVE_TYPES
from .event import Event
from .employee_document import EmployeeDocument

__all__ = [
    "Employee",
    "Admin",
    "LeaveEvent",
    "LeaveSummary",
    "LEAVE_TYPES",
    "Event",
    "EmployeeDocument",
]
