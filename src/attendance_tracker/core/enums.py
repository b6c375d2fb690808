from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Who is signed in."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Status of one generated attendance day."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


class RecordStatus(str, Enum):
    """Status stored in the `attendance` table by admins and check-ins."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    ON_LEAVE = "on_leave"


class LeaveType(str, Enum):
    PL = "PL"
    CL = "CL"
    SL = "SL"
    OD = "OD"
    OTHER = "Other"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"
