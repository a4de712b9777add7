from .worker import Worker
from .worker_login import WorkerLogin
from .admin import Admin
from .schedule import Schedule
from .assignment import Assignment
from .shift import Shift, ShiftType

__all__ = [
    "Worker",
    "WorkerLogin",
    "Admin",
    "Schedule",
    "Assignment",
    "Shift",
    "ShiftType",
]
